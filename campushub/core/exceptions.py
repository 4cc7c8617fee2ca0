from typing import Optional


class CampusHubError(Exception):
    """Базовая ошибка ядра вовлеченности и совместной работы"""

    default_message = "Operation failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(CampusHubError, LookupError):
    """Сущность, комментарий, заявка или участник не найдены"""

    default_message = "Not found"


class AuthorizationDenied(CampusHubError, PermissionError):
    """У пользователя нет нужной роли или членства"""

    default_message = "Not authorized"


class ValidationError(CampusHubError, ValueError):
    """Некорректные данные дошли до ядра"""

    default_message = "Validation failed"


class ConflictError(CampusHubError):
    """Конкурентная запись не прошла проверку версии"""

    default_message = "Concurrent modification conflict"


class InvalidStateError(CampusHubError):
    """Переход не разрешен из текущего состояния"""

    default_message = "Invalid state transition"


class OwnerCannotLeave(InvalidStateError):
    default_message = "Project owner cannot leave the project"


class DepthLimitExceeded(CampusHubError):
    """Ответ на комментарий максимальной глубины"""

    default_message = "Maximum reply depth reached"
