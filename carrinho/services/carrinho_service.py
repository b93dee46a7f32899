# carrinho/services/carrinho_service.py

from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from django.conf import settings

from armazenamento.services.gerenciador_service import GerenciadorArmazenamento
from carrinho.services.dto import ItemCarrinho, Promocao
from carrinho.services.espelho_service import (
    CHAVE_ITENS,
    CHAVE_PROMOCAO,
    EspelhoSessaoRepositorio,
)
from produtos.services.repositorio_service import ProdutoRepositorio

logger = logging.getLogger(__name__)

CENTAVOS = Decimal("0.01")


def arredondar_centavos(valor: Decimal) -> Decimal:
    return Decimal(valor).quantize(CENTAVOS, rounding=ROUND_HALF_UP)


def taxa_imposto_padrao() -> Decimal:
    return Decimal(str(getattr(settings, "TAXA_IMPOSTO", "0.05")))


class Carrinho:
    """
    Carrinho de compras em memória, espelhado no armazenamento local.

    Regras:
    - Quantidade de uma linha nunca passa do estoque conhecido do produto;
      pedidos acima disso são limitados e a operação retorna False
      (aviso para a tela), nunca erro.
    - Promoção ativa reduz o preço da linha do produto promovido e guarda
      o preço anterior em `preco_original`; remover a promoção devolve.
    - Toda mutação sobrescreve o espelho (itens e promoção em chaves
      separadas). `carregar()` lê o espelho uma vez na inicialização.
    """

    def __init__(
        self,
        *,
        gerenciador: Optional[GerenciadorArmazenamento] = None,
        produtos: Optional[ProdutoRepositorio] = None,
        espelho: Optional[EspelhoSessaoRepositorio] = None,
        taxa_imposto: Optional[Decimal] = None,
    ):
        self.produtos = produtos or ProdutoRepositorio(gerenciador)
        self.espelho = espelho or EspelhoSessaoRepositorio(gerenciador)
        self.taxa_imposto = (
            taxa_imposto_padrao() if taxa_imposto is None else Decimal(taxa_imposto)
        )
        self.itens: List[ItemCarrinho] = []
        self.promocao: Optional[Promocao] = None

    @classmethod
    def carregar(cls, **kwargs) -> "Carrinho":
        carrinho = cls(**kwargs)
        itens = carrinho.espelho.ler(CHAVE_ITENS) or []
        promocao = carrinho.espelho.ler(CHAVE_PROMOCAO)

        carrinho.itens = [ItemCarrinho.de_dict(d) for d in itens]
        carrinho.promocao = Promocao.de_dict(promocao) if promocao else None

        logger.info(
            "Carrinho carregado do espelho. linhas=%s, promocao=%s",
            len(carrinho.itens),
            bool(carrinho.promocao),
        )
        return carrinho

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------
    def item(self, produto_id: str) -> Optional[ItemCarrinho]:
        for it in self.itens:
            if it.produto_id == produto_id:
                return it
        return None

    @property
    def vazio(self) -> bool:
        return not self.itens

    @property
    def quantidade_total(self) -> int:
        return sum(it.quantidade for it in self.itens)

    @property
    def subtotal(self) -> Decimal:
        return arredondar_centavos(sum((it.total for it in self.itens), Decimal("0")))

    @property
    def impostos(self) -> Decimal:
        return arredondar_centavos(self.subtotal * self.taxa_imposto)

    @property
    def total(self) -> Decimal:
        return self.subtotal + self.impostos

    def _estoque_atual(self, produto_id: str, padrao: int) -> int:
        produto = self.produtos.buscar(produto_id)
        return produto.estoque if produto is not None else padrao

    # ------------------------------------------------------------------
    # Mutações
    # ------------------------------------------------------------------
    def adicionar(self, produto, quantidade: int) -> bool:
        """
        Adiciona `quantidade` do produto. Retorna False se a quantidade
        foi limitada pelo estoque (ou se nada pôde ser adicionado).
        """
        quantidade = int(quantidade)
        if quantidade <= 0:
            return False

        estoque = self._estoque_atual(produto.id, produto.estoque)
        existente = self.item(produto.id)

        if existente is not None:
            desejada = existente.quantidade + quantidade
            nova = min(desejada, estoque)
            if nova <= 0:
                # estoque zerou depois que a linha entrou no carrinho
                self.itens.remove(existente)
                logger.warning(
                    "Produto sem estoque removido do carrinho. produto_id=%s",
                    produto.id,
                )
                self._persistir()
                return False
            existente.quantidade = nova
            sucesso = nova >= desejada
        else:
            nova = min(quantidade, estoque)
            sucesso = nova >= quantidade
            if nova <= 0:
                logger.warning(
                    "Produto sem estoque não adicionado ao carrinho. produto_id=%s",
                    produto.id,
                )
                return False

            item = ItemCarrinho(
                produto_id=produto.id,
                nome=produto.nome,
                preco=arredondar_centavos(produto.preco),
                quantidade=nova,
                estoque=estoque,
                categoria=getattr(produto, "categoria", "") or "",
                imagem_url=getattr(produto, "imagem_url", "") or "",
            )
            if self.promocao is not None and self._promove(item):
                self._aplicar_desconto(item)
            self.itens.append(item)

        if not sucesso:
            logger.warning(
                "Quantidade limitada ao estoque. produto_id=%s, solicitado=%s, estoque=%s",
                produto.id,
                quantidade,
                estoque,
            )

        logger.info(
            "Item adicionado ao carrinho. produto_id=%s, qtd=%s, linhas=%s",
            produto.id,
            quantidade,
            len(self.itens),
        )
        self._persistir()
        return sucesso

    def atualizar_quantidade(self, produto_id: str, quantidade: int) -> bool:
        """
        Define a quantidade da linha, limitada a [0, estoque]. Zero remove.
        """
        quantidade = int(quantidade)
        item = self.item(produto_id)
        if item is None:
            return True

        estoque = self._estoque_atual(produto_id, 0)
        nova = max(0, min(quantidade, estoque, item.estoque))
        sucesso = nova >= quantidade

        if nova == 0:
            self.itens.remove(item)
        else:
            item.quantidade = nova

        if not sucesso:
            logger.warning(
                "Quantidade limitada ao estoque. produto_id=%s, solicitado=%s, aplicado=%s",
                produto_id,
                quantidade,
                nova,
            )
        self._persistir()
        return sucesso

    def remover(self, produto_id: str) -> None:
        self.itens = [it for it in self.itens if it.produto_id != produto_id]
        logger.info("Item removido do carrinho. produto_id=%s", produto_id)
        self._persistir()

    def aplicar_promocao(self, promocao: Promocao) -> None:
        promocao.validar()
        self.promocao = promocao

        if promocao.tem_desconto:
            for item in self.itens:
                if self._promove(item):
                    self._aplicar_desconto(item)

        logger.info(
            "Promoção aplicada. produto_id=%s, percentual=%s",
            promocao.produto_id,
            promocao.percentual_desconto,
        )
        self._persistir()

    def remover_promocao(self) -> None:
        self.promocao = None
        for item in self.itens:
            if item.preco_original is not None:
                item.preco = item.preco_original
                item.preco_original = None
        logger.info("Promoção removida do carrinho.")
        self._persistir()

    def limpar(self) -> None:
        self.itens = []
        self.remover_promocao()

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------
    def _promove(self, item: ItemCarrinho) -> bool:
        return (
            self.promocao is not None
            and self.promocao.tem_desconto
            and self.promocao.produto_id == item.produto_id
        )

    def _aplicar_desconto(self, item: ItemCarrinho) -> None:
        if item.preco_original is None:
            item.preco_original = item.preco
        fator = Decimal("1") - Decimal(str(self.promocao.percentual_desconto))
        item.preco = arredondar_centavos(item.preco_original * fator)

    def _persistir(self) -> None:
        self.espelho.gravar(CHAVE_ITENS, [it.como_dict() for it in self.itens])
        if self.promocao is not None:
            self.espelho.gravar(CHAVE_PROMOCAO, self.promocao.como_dict())
        else:
            self.espelho.apagar(CHAVE_PROMOCAO)
