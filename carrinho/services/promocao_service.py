# carrinho/services/promocao_service.py

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Optional, Protocol

from armazenamento.services.gerenciador_service import GerenciadorArmazenamento
from carrinho.services.carrinho_service import Carrinho
from carrinho.services.dto import Promocao
from produtos.services.repositorio_service import ProdutoRepositorio
from vendas.services.repositorio_service import VendaRepositorio

logger = logging.getLogger(__name__)

MENSAGEM_SEM_ESTOQUE = (
    "Nossos doces estão em alta demanda! Volte em breve para novas ofertas."
)
MENSAGEM_SEM_RESPOSTA = (
    "Não foi possível gerar uma promoção no momento. Aproveite nossos preços!"
)
MENSAGEM_PRODUTO_INVALIDO = (
    "Confira nossos deliciosos doces! Temos ótimas opções para você."
)


class GeradorPromocao(Protocol):
    """
    Colaborador externo que sugere uma promoção.

    Recebe documentos JSON:
    - historico_compras: [{"produto_id", "quantidade", "data"}]
    - inventario_atual: [{"id", "nome", "estoque", "preco", "categoria"}],
      só produtos com estoque > 0
    - itens_carrinho: [{"id", "nome", "quantidade", "preco"}] ou None
    """

    def gerar(
        self,
        historico_compras: str,
        inventario_atual: str,
        itens_carrinho: Optional[str],
    ) -> Optional[Promocao]:
        ...


def _historico_compras(vendas: VendaRepositorio) -> str:
    return json.dumps(
        [
            {
                "produto_id": v.produto_id,
                "quantidade": v.quantidade,
                "data": v.data.isoformat(),
            }
            for v in vendas.listar()
        ],
        ensure_ascii=False,
    )


def _inventario(produtos_em_estoque) -> str:
    return json.dumps(
        [
            {
                "id": p.id,
                "nome": p.nome,
                "estoque": p.estoque,
                "preco": float(p.preco),
                "categoria": p.categoria,
            }
            for p in produtos_em_estoque
        ],
        ensure_ascii=False,
    )


def _itens_carrinho(carrinho: Optional[Carrinho]) -> Optional[str]:
    if carrinho is None or carrinho.vazio:
        return None
    return json.dumps(
        [
            {
                "id": it.produto_id,
                "nome": it.nome,
                "quantidade": it.quantidade,
                "preco": float(it.preco),
            }
            for it in carrinho.itens
        ],
        ensure_ascii=False,
    )


def solicitar_promocao(
    gerador: GeradorPromocao,
    carrinho: Optional[Carrinho] = None,
    *,
    gerenciador: Optional[GerenciadorArmazenamento] = None,
) -> Promocao:
    """
    Pede uma promoção ao gerador e saneia o resultado.

    - Nenhum produto com estoque: mensagem padrão, gerador não é chamado.
    - Gerador sem resposta: mensagem padrão.
    - Desconto sem produto: desconto descartado.
    - Produto fora do inventário em estoque: desconto descartado e
      mensagem genérica.
    - Percentual fora de [0, 1): PromocaoInvalidaError.
    """
    produtos = ProdutoRepositorio(gerenciador)
    vendas = VendaRepositorio(gerenciador)

    em_estoque = produtos.listar_em_estoque()
    if not em_estoque:
        logger.info("Promoção não solicitada: nenhum produto em estoque.")
        return Promocao(mensagem=MENSAGEM_SEM_ESTOQUE)

    promocao = gerador.gerar(
        _historico_compras(vendas),
        _inventario(em_estoque),
        _itens_carrinho(carrinho),
    )
    if promocao is None:
        logger.warning("Gerador de promoção não retornou resultado.")
        return Promocao(mensagem=MENSAGEM_SEM_RESPOSTA)

    if promocao.percentual_desconto is not None:
        promocao.percentual_desconto = Decimal(str(promocao.percentual_desconto))

    if promocao.percentual_desconto and not promocao.produto_id:
        logger.warning(
            "Promoção com desconto sem produto; desconto descartado. percentual=%s",
            promocao.percentual_desconto,
        )
        promocao.percentual_desconto = None

    ids_em_estoque = {p.id for p in em_estoque}
    if promocao.produto_id and promocao.produto_id not in ids_em_estoque:
        logger.warning(
            "Promoção para produto inválido ou sem estoque; desconto descartado. produto_id=%s",
            promocao.produto_id,
        )
        promocao.produto_id = None
        promocao.percentual_desconto = None
        promocao.mensagem = MENSAGEM_PRODUTO_INVALIDO

    promocao.validar()

    logger.info(
        "Promoção recebida. produto_id=%s, percentual=%s",
        promocao.produto_id,
        promocao.percentual_desconto,
    )
    return promocao
