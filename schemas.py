"""
Portfolio Schemas

Pydantic models for the payloads the entry form submits, and one validation
entry point per shape. Validation never stops at the first bad field: every
failing field is collected so the form can show all inline errors together.

Payloads use camelCase keys (shortBio, socialMedia, ...); the models expose
snake_case attributes through aliases.
"""

import re
from typing import Optional, Tuple

from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from utils.errors import FieldError, ValidationError
from utils.helpers import split_list

_url_adapter = TypeAdapter(AnyUrl)

# Messages for fields that are missing or empty, keyed by field path with list
# indices collapsed to "[]"
REQUIRED_MESSAGES = {
    'name': 'Name is required',
    'shortBio': 'Short bio is required',
    'projects': 'At least one project is required',
    'projects[].title': 'Project title is required',
    'projects[].description': 'Project description is required',
    'socialMedia[].name': 'Platform name is required',
    'socialMedia[].url': 'Must be a valid URL',
    'email': 'Must be a valid email',
    'message': 'Message is required',
    'username': 'Username is required',
    'password': 'Password is required',
}

_REQUIRED_ERROR_TYPES = {'missing', 'string_too_short', 'too_short'}


def check_url(value):
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError('Must be a valid URL') from None
    return value


def check_email(value):
    # Bare addresses only; "Name <addr>" display-name forms are rejected
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise ValueError('Must be a valid email') from None
    return value


class CamelModel(BaseModel):
    # Input is matched on camelCase keys only; snake_case keys are unknown and dropped
    model_config = ConfigDict(alias_generator=to_camel, frozen=True)

    def to_dict(self):
        """Serialize with camelCase keys, leaving out fields the client never sent"""
        return self.model_dump(mode='json', by_alias=True, exclude_unset=True)


class SocialMedia(CamelModel):
    name: str = Field(..., min_length=1, description="Platform name, e.g. GitHub")
    url: str = Field(..., description="Profile URL on that platform")

    @field_validator('url')
    @classmethod
    def url_must_be_valid(cls, value):
        return check_url(value)


class Project(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    image: Optional[str] = Field(None, description="Screenshot URL, may be empty")
    github: Optional[str] = Field(None, description="Repository URL, may be empty")

    @field_validator('image', 'github')
    @classmethod
    def empty_or_url(cls, value):
        if value:
            return check_url(value)
        return value


class PortfolioData(CamelModel):
    name: str = Field(..., min_length=1)
    short_bio: str = Field(..., min_length=1)
    full_bio: Optional[str] = None
    profile_picture: Optional[str] = None
    skills: Optional[str] = Field(None, description="Comma-delimited skills")
    interests: Optional[str] = Field(None, description="Comma-delimited interests")
    projects: Tuple[Project, ...] = Field(..., min_length=1, description="In display order")
    social_media: Tuple[SocialMedia, ...] = Field(default_factory=tuple)
    contact_email: Optional[str] = None

    @field_validator('profile_picture')
    @classmethod
    def empty_or_url(cls, value):
        if value:
            return check_url(value)
        return value

    @field_validator('contact_email')
    @classmethod
    def empty_or_email(cls, value):
        if value:
            return check_email(value)
        return value

    @property
    def skill_list(self):
        return split_list(self.skills)

    @property
    def interest_list(self):
        return split_list(self.interests)


class ContactForm(CamelModel):
    name: str = Field(..., min_length=1)
    email: str
    message: str = Field(..., min_length=1)

    @field_validator('email')
    @classmethod
    def email_must_be_valid(cls, value):
        return check_email(value)


class InsertUser(CamelModel):
    username: str = Field(..., min_length=1)
    password: str


def field_path(loc):
    """Render a pydantic error location as e.g. projects[0].title"""
    path = ''
    for part in loc:
        if isinstance(part, int):
            path += f'[{part}]'
        elif path:
            path += f'.{part}'
        else:
            path = str(part)
    return path


def _field_message(error, path):
    if error['type'] in _REQUIRED_ERROR_TYPES:
        message = REQUIRED_MESSAGES.get(re.sub(r'\[\d+\]', '[]', path))
        if message:
            return message
    if error['type'] == 'value_error':
        return str(error['ctx']['error'])
    return error['msg']


def _validate(model, raw):
    try:
        return model.model_validate(raw)
    except PydanticValidationError as exc:
        errors = []
        for error in exc.errors():
            path = field_path(error['loc'])
            errors.append(FieldError(path, _field_message(error, path)))
        raise ValidationError(errors) from None


def validate_portfolio(raw):
    """Validate an untrusted portfolio payload, returning PortfolioData"""
    return _validate(PortfolioData, raw)


def validate_contact_form(raw):
    """Validate name, email and message of a contact submission"""
    return _validate(ContactForm, raw)


def validate_user(raw):
    return _validate(InsertUser, raw)
