# backup/services/exceptions.py


class BackupError(Exception):
    """
    Erro genérico de backup/restauração.
    Base para erros específicos.
    """

    def __init__(self, mensagem: str):
        self.mensagem = mensagem
        super().__init__(mensagem)


class BackupInvalidoError(BackupError):
    """
    Documento de backup ilegível ou fora do formato esperado.
    """

    def __init__(self, mensagem: str = "Arquivo de backup inválido."):
        super().__init__(mensagem)


class FalhaRestauracaoError(BackupError):
    """
    Falha ao restaurar uma coleção.

    - colecao: coleção em que a falha ocorreu.
    - concluidas: coleções já restauradas antes dela.
    - revertida: True quando nenhuma alteração ficou gravada.
    """

    def __init__(
        self,
        colecao: str,
        concluidas=None,
        causa=None,
        revertida: bool = True,
        mensagem: str = None,
    ):
        self.colecao = colecao
        self.concluidas = list(concluidas or [])
        self.causa = causa
        self.revertida = revertida
        if mensagem is None:
            mensagem = f"Falha ao restaurar a coleção '{colecao}': {causa}"
        super().__init__(mensagem)
