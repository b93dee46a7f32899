# armazenamento/exceptions.py


class ArmazenamentoError(Exception):
    """
    Erro genérico do armazenamento local.
    Base para erros específicos.
    """

    def __init__(self, mensagem: str):
        self.mensagem = mensagem
        super().__init__(mensagem)


class ArmazenamentoIndisponivelError(ArmazenamentoError):
    """
    O ambiente não oferece armazenamento durável (alias inexistente,
    engine ausente ou banco inacessível).
    """

    def __init__(
        self,
        mensagem: str = "Armazenamento local indisponível neste ambiente.",
        causa=None,
    ):
        self.causa = causa
        super().__init__(mensagem)


class ConflitoVersaoSchemaError(ArmazenamentoError):
    """
    Outro processo abriu o armazenamento com um schema mais novo.
    O chamador deve recarregar em vez de operar com o schema antigo.
    """

    def __init__(
        self,
        mensagem: str = (
            "Uma nova versão do armazenamento está em uso. "
            "Por favor, recarregue a aplicação."
        ),
        migracoes_desconhecidas=None,
    ):
        self.migracoes_desconhecidas = sorted(migracoes_desconhecidas or [])
        super().__init__(mensagem)


class MigracaoDestrutivaError(ArmazenamentoError):
    """
    Migração contém operação que não é aditiva (remoção/alteração).
    """

    def __init__(self, mensagem: str, migracao=None, operacao=None):
        self.migracao = migracao
        self.operacao = operacao
        super().__init__(mensagem)


class ColecaoDesconhecidaError(ArmazenamentoError):
    def __init__(self, colecao: str):
        self.colecao = colecao
        super().__init__(f"Coleção '{colecao}' não existe no armazenamento.")


class ChaveDuplicadaError(ArmazenamentoError):
    """
    Inserção com chave já existente na coleção.
    """

    def __init__(self, colecao: str, chave):
        self.colecao = colecao
        self.chave = chave
        super().__init__(
            f"Já existe um registro com a chave '{chave}' em '{colecao}'."
        )


class RegistroNaoEncontradoError(ArmazenamentoError):
    """
    Operação (leitura/atualização) sobre chave inexistente.
    Remoção de chave inexistente NÃO gera este erro.
    """

    def __init__(self, colecao: str, chave, mensagem: str = None):
        self.colecao = colecao
        self.chave = chave
        super().__init__(
            mensagem or f"Registro '{chave}' não encontrado em '{colecao}'."
        )
