"""
Project error taxonomy

Record-level problems are reported with Django's ValidationError.
The classes below cover the data store itself.
"""


class TravelDeskError(Exception):
    """Base class for errors raised by the project"""


class FetchError(TravelDeskError):
    """The data store could not be read"""


class StoreError(TravelDeskError):
    """The data store rejected an insert"""
