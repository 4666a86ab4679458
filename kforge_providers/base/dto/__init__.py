"""DTO validation package for providers."""

from .generate import CredentialBodyDTO, GenerateRequestDTO, validation_error_message

__all__ = ["GenerateRequestDTO", "CredentialBodyDTO", "validation_error_message"]
