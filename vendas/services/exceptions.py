# vendas/services/exceptions.py


class VendaError(Exception):
    """
    Erro genérico de venda.
    Base para erros específicos.
    """

    def __init__(self, mensagem: str):
        self.mensagem = mensagem
        super().__init__(mensagem)


class EstoqueInsuficienteError(VendaError):
    """
    Quantidade solicitada maior que o estoque disponível do produto.
    """

    def __init__(
        self,
        mensagem: str = None,
        produto_id=None,
        produto_nome=None,
        disponivel=None,
        solicitado=None,
    ):
        self.produto_id = produto_id
        self.produto_nome = produto_nome
        self.disponivel = disponivel
        self.solicitado = solicitado
        if mensagem is None:
            mensagem = (
                f"Estoque insuficiente: apenas {disponivel} unidade(s) de "
                f"{produto_nome or produto_id} disponível(is); solicitado {solicitado}."
            )
        super().__init__(mensagem)
