"""Custom exception classes"""
from fastapi import HTTPException, status


class CMSException(HTTPException):
    """Base exception for the CMS API"""
    pass


class BadRequestException(CMSException):
    """Raised when input is missing or malformed"""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail
        )


class UnauthorizedException(CMSException):
    """Raised when the credential is missing, invalid or expired"""
    def __init__(self, detail: str = "Not authorized"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"}
        )


class ForbiddenException(CMSException):
    """Raised when user lacks required permissions"""
    def __init__(self, detail: str = "Forbidden"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail
        )


class NotFoundException(CMSException):
    """Raised when an addressed record does not exist"""
    def __init__(self, detail: str = "Not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail
        )


class AdminNotFoundException(NotFoundException):
    def __init__(self):
        super().__init__("Admin not found")


class ConflictException(CMSException):
    """Raised on a duplicate unique key"""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail
        )


class ServerErrorException(CMSException):
    """Raised for unexpected store or crypto failures"""
    def __init__(self, detail: str = "Server error"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail
        )
