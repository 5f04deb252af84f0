from pydantic import BaseModel


class AddContactCommand(BaseModel):
    schema_name: str
    address: str


class RequestConfirmationResponse(BaseModel):
    status: str
    message: str


class RemoveContactResponse(BaseModel):
    status: str
