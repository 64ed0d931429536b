from pydantic import BaseModel, ConfigDict, field_validator


def require_value(v):
    """Reject missing or falsy values (None, "", 0, False); anything else passes on."""
    if not v:
        raise ValueError('Field is required')
    return v


class SignupForm(BaseModel):
    # Numbers are stored as their text, like the database would coerce them
    model_config = ConfigDict(coerce_numbers_to_str=True)

    username: str
    email: str
    password: str

    @field_validator('username', 'email', 'password', mode='before')
    @classmethod
    def must_not_be_empty(cls, v):
        return require_value(v)


class ContactForm(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    email: str
    message: str

    @field_validator('name', 'email', 'message', mode='before')
    @classmethod
    def must_not_be_empty(cls, v):
        return require_value(v)


class SubmissionResponse(BaseModel):
    success: bool
    message: str
