class SimarioInfrastructureError(Exception):
    pass


class DataSourceError(SimarioInfrastructureError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass


class UnsupportedFileTypeError(DataSourceError):
    pass
