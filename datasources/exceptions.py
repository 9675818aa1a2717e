# datasources/exceptions.py

class DataSourceError(Exception):
    pass


class DataSourceUnavailable(DataSourceError):
    pass


class QueryTimeout(DataSourceError):
    pass


class InvalidQuery(DataSourceError):
    pass


class AuthenticationFailed(InvalidQuery):
    pass


class MissingApiKey(DataSourceError):
    pass
