"""Common dependencies shared by the routers."""
from typing import Annotated, TypeAlias

from fastapi import Depends
from sqlalchemy.orm import Session

from inventory_api.api.routes_auth import get_current_user_id
from inventory_api.db.session import get_db

CurrentUserDep: TypeAlias = Annotated[int, Depends(get_current_user_id)]
DbDep: TypeAlias = Annotated[Session, Depends(get_db)]
