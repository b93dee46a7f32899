# carrinho/services/exceptions.py


class CarrinhoError(Exception):
    """
    Erro genérico do carrinho.
    Base para erros específicos.
    """

    def __init__(self, mensagem: str):
        self.mensagem = mensagem
        super().__init__(mensagem)


class CarrinhoVazioError(CarrinhoError):
    def __init__(self, mensagem: str = "Seu carrinho está vazio."):
        super().__init__(mensagem)


class PromocaoInvalidaError(CarrinhoError):
    """
    Promoção recebida do gerador com percentual fora de [0, 1).
    """

    def __init__(self, mensagem: str = None, percentual=None):
        self.percentual = percentual
        if mensagem is None:
            mensagem = f"Percentual de desconto inválido na promoção: {percentual}."
        super().__init__(mensagem)
