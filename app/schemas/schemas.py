from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator
from typing import Optional
from app.core.config import settings

class UserRegister(BaseModel):
    first_name: str = Field(alias="firstName", min_length=1)
    last_name: str = Field(alias="lastName", min_length=1)
    email: EmailStr
    mobile: str = Field(min_length=1)
    country_id: int = Field(alias="countryId")
    password: str
    confirm_password: str = Field(alias="confirmPassword")

    class Config:
        populate_by_name = True

    @field_validator("first_name", "last_name", "mobile")
    @classmethod
    def strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("All fields are required")
        return value

    @model_validator(mode="after")
    def check_passwords(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        if len(self.password) < settings.PASSWORD_MIN_LENGTH:
            raise ValueError(f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters")
        return self

class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

class UserUpdate(BaseModel):
    first_name: Optional[str] = Field(default=None, alias="firstName", min_length=1)
    last_name: Optional[str] = Field(default=None, alias="lastName", min_length=1)
    email: Optional[EmailStr] = None
    mobile: Optional[str] = Field(default=None, min_length=1)
    country_id: Optional[int] = Field(default=None, alias="countryId")

    class Config:
        populate_by_name = True

class UserOut(BaseModel):
    id: int
    first_name: str = Field(serialization_alias="firstName")
    last_name: str = Field(serialization_alias="lastName")
    email: str
    mobile: str
    country_id: int = Field(serialization_alias="countryId")

    class Config:
        from_attributes = True

class CountryOut(BaseModel):
    id: int
    code: str
    name: str
    phone_code: str = Field(serialization_alias="phoneCode")

    class Config:
        from_attributes = True
