#!/usr/bin/env python3
"""
Service layer exceptions.

Terminal failures raised to the caller of a matching operation. Per-entity
failures inside a bulk loop (a single job or candidate failing to score, or
a cache row failing to persist) are recovered locally and never raised.
"""


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class CandidateNotFoundException(ServiceException):
    """Raised when a candidate profile does not exist."""
    pass


class JobNotFoundException(ServiceException):
    """Raised when a job posting does not exist."""
    pass


class JobAccessDeniedException(ServiceException):
    """Raised when a job exists but does not belong to the requesting employer."""
    pass


class InvalidRequestException(ServiceException):
    """Raised when request parameters are out of range."""
    pass
