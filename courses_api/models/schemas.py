"""
Request body contracts, checked at the HTTP boundary
"""
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from ..utils.errors import MalformedRequestError
from .course import NAME_MAX_LENGTH, URL_MAX_LENGTH
from .review import RATING_MAX, RATING_MIN


class CourseCreate(BaseModel):
    model_config = ConfigDict(extra='ignore')

    name: StrictStr = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    url: StrictStr = Field(min_length=1, max_length=URL_MAX_LENGTH)


class ReviewCreate(BaseModel):
    # courseId comes from the path, so a body value is dropped
    model_config = ConfigDict(extra='ignore')

    rating: StrictInt = Field(ge=RATING_MIN, le=RATING_MAX)
    comment: StrictStr


def parse_body(schema, data):
    """
    Validate a decoded JSON body against a schema
    @param schema: type - pydantic model class
    @param data: Any - Decoded JSON body, None when the body was not JSON
    @returns: BaseModel - Validated instance
    @raises: MalformedRequestError if the body is missing or does not match
    """
    if data is None:
        raise MalformedRequestError('Request body must be valid JSON')
    if not isinstance(data, dict):
        raise MalformedRequestError('Request body must be a JSON object')

    try:
        return schema.model_validate(data)
    except ValidationError as e:
        details = [
            {
                'field': '.'.join(str(part) for part in error['loc']),
                'message': error['msg']
            }
            for error in e.errors()
        ]
        raise MalformedRequestError(f'Invalid {schema.__name__} body', details=details)
