from typing import List

from pydantic import BaseModel

from account_service.app.use_cases.auth.dtos import AccountInfo, ContactInfo


class UpdateAccountCommand(BaseModel):
    language: str
    timezone: str


class UpdatePasswordCommand(BaseModel):
    current_password: str
    new_password1: str
    new_password2: str


class AccountDetailsResponse(BaseModel):
    account: AccountInfo
    contacts: List[ContactInfo]
    permissions: List[str]


class UpdatePasswordResponse(BaseModel):
    status: str
    message: str
