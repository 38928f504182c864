"""
Explicit request context for the core services.

Views build one Requester per request from the authenticated account and pass
it into every service call, so services never look at cookies, sessions or
the request object.
"""
from dataclasses import dataclass

from .models import Account


@dataclass(frozen=True)
class Requester:
    account_id: int
    role: str

    @property
    def is_manager(self) -> bool:
        return self.role == Account.ROLE_ADMIN

    @classmethod
    def for_account(cls, account: Account) -> "Requester":
        return cls(account_id=account.pk, role=account.role)

    @classmethod
    def from_request(cls, request) -> "Requester":
        return cls.for_account(request.user)
