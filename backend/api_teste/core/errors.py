class ApiError(Exception):
    """Base error rendered as ``{"error": message}`` with ``status_code``."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TaskNotFound(ApiError):
    status_code = 404

    def __init__(self):
        super().__init__("Tarefa não encontrada")


class InvalidTask(ApiError):
    pass


class InvalidFormat(ApiError):
    pass


class InvalidConfiguration(ApiError):
    pass
