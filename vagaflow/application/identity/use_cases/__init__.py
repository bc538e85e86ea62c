from .authenticate_user_use_case import AuthenticateUserUseCase
from .create_user_use_case import CreateUserUseCase
from .get_user_by_id_use_case import GetUserByIdUseCase
from .register_user_use_case import RegisterUserUseCase

__all__ = [
    "AuthenticateUserUseCase",
    "CreateUserUseCase",
    "GetUserByIdUseCase",
    "RegisterUserUseCase",
]
