class ExternalFilesError(Exception):
    pass


class SettingsError(ExternalFilesError):
    pass
