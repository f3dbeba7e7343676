from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from letsgo.core.dependencies import get_db, require_actor
from letsgo.core.exceptions import Unauthenticated
from letsgo.core.jwt import create_access_token
from letsgo.core.logging_config import get_logger
from letsgo.core.security import authenticate_user
from letsgo.models.user import User
from letsgo.schemas.common import ApiResponse
from letsgo.schemas.user import TokenOut, UserLogin, UserOut

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = get_logger()


# =====================================================================
#                               LOGIN
# =====================================================================
@router.post("/login", response_model=ApiResponse[TokenOut])
def login(data: UserLogin, db: Session = Depends(get_db)):
    user = authenticate_user(db, data.email, data.password)
    if not user:
        logger.bind(log_type="admin").warning(f"Failed sign-in | Email={data.email}")
        raise Unauthenticated("Invalid email or password")

    token = create_access_token({"sub": str(user.id), "role": user.role})
    logger.bind(log_type="admin").info(f"Signed in | User={user.id} | Role={user.role}")

    return ApiResponse(data=TokenOut(access_token=token, user=UserOut.model_validate(user)))


# =====================================================================
#                           CURRENT ACTOR
# =====================================================================
@router.get("/me", response_model=ApiResponse[UserOut])
def me(actor: User = Depends(require_actor)):
    return ApiResponse(data=UserOut.model_validate(actor))
