"""
URL converters for entity ids
"""
from werkzeug.routing import IntegerConverter

# Largest value an Integer column holds on every backend we run against
MAX_ID = 2**31 - 1


class IdConverter(IntegerConverter):
    """
    Non-negative integer no larger than MAX_ID. Anything else does not
    match the route, so the request ends in the usual 404.
    """

    def __init__(self, map, max=MAX_ID):
        super().__init__(map, min=0, max=max)
