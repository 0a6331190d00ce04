class FormSerializeError(Exception):
    """Exceção base para erros do form-serialize."""


class FormSerializeConfigError(FormSerializeError):
    """Erro relacionado à configuração da serialização."""


class FormNotFoundError(FormSerializeError):
    """Erro quando o formulário procurado não existe no HTML."""


class FormSubmitError(FormSerializeError):
    """Erro relacionado ao envio HTTP de um formulário serializado."""
