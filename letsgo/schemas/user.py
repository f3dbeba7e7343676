from pydantic import BaseModel, EmailStr


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class ActorOut(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class UserOut(ActorOut):
    email: EmailStr
    role: str


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut
