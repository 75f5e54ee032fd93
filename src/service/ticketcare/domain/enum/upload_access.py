from enum import StrEnum


class UploadAccess(StrEnum):
    PUBLIC = 'public'
    PRIVATE = 'private'
