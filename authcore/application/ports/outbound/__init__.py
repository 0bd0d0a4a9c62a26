"""Outbound ports (secondary/driven ports)."""

from authcore.application.ports.outbound.password_hasher_port import PasswordHasherPort
from authcore.application.ports.outbound.role_repository_port import RoleRepositoryPort
from authcore.application.ports.outbound.session_store_port import SessionStorePort
from authcore.application.ports.outbound.token_issuer_port import TokenIssuerPort
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.ports.outbound.user_repository_port import UserRepositoryPort

__all__ = [
    "PasswordHasherPort",
    "RoleRepositoryPort",
    "SessionStorePort",
    "TokenIssuerPort",
    "UnitOfWorkPort",
    "UserRepositoryPort",
]
