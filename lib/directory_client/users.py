from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar
from urllib.parse import quote

from .codec import JSONModel
from .context import CallContext
from .errors import ValidationError
from .options import QueryOptions, add_options

if TYPE_CHECKING:
    from .transport import Response, Transport


@dataclass
class User(JSONModel):
    JSON_KEYS: ClassVar[dict[str, str]] = {
        "core_id": "coreId",
        "full_name": "fullName",
        "status": "status",
        "id": "id",
    }

    core_id: str = ""
    full_name: str = ""
    status: str = ""
    id: str = ""


@dataclass
class UsersOptions(QueryOptions):
    """Optional parameters for ``UsersService.get``."""

    QUERY_KEYS: ClassVar[dict[str, str]] = {"fields": "fields"}

    fields: str | None = None


class UsersService:
    def __init__(self, transport: Transport):
        self._t = transport

    def get(
            self,
            user_id: str,
            options: UsersOptions | None = None,
            *,
            ctx: CallContext | None = None,
    ) -> tuple[User, Response]:
        if not user_id:
            raise ValidationError("user id can not be empty")

        path = add_options(f"employee/{quote(str(user_id), safe='')}", options)
        req = self._t.new_request("GET", path)
        user = User()
        resp = self._t.do(req, user, ctx=ctx)
        return user, resp
