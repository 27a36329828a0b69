from typing import List

from constants import Role
from models import User
from dtos.request import UserRequest
from dtos.response import UserResponse


class UserMapper:
    """
    Converts between User entities and user DTOs.

    Passwords are never copied here: services hash them before assignment.
    """

    @staticmethod
    def to_dto(user: User) -> UserResponse:
        return UserResponse(
            id=user.id,
            name=user.name,
            email=user.email,
            role=Role(user.role),
        )

    @staticmethod
    def to_dto_list(users: List[User]) -> List[UserResponse]:
        return [UserMapper.to_dto(user) for user in users]

    @staticmethod
    def to_entity(dto: UserRequest) -> User:
        role = dto.role or Role.USER
        return User(name=dto.name, email=dto.email, role=role.value)

    @staticmethod
    def update_entity_from_dto(dto: UserRequest, user: User) -> User:
        user.name = dto.name
        user.email = dto.email
        # A missing role keeps the current one
        if dto.role is not None:
            user.role = dto.role.value
        return user
