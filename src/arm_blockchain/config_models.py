"""
Pydantic models for YAML client configuration.
Provides schema validation with clear error messages before a client is built.
"""

from __future__ import annotations
import os
from typing import Mapping, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from arm_blockchain.core.constants import DEFAULT_ACCEPT_LANGUAGE, DEFAULT_API_VERSION, DEFAULT_BASE_URI
from arm_blockchain.core.errors import ConfigurationError


class ClientSection(BaseModel):
    """Target subscription and provider settings."""
    subscription_id: str = Field(..., min_length=1, description="Azure subscription id")
    resource_group: str = Field("", description="Resource group holding the blockchain members")
    location: str = Field("", description="Azure region used for name availability checks")
    base_uri: str = Field(DEFAULT_BASE_URI, description="Resource Manager endpoint")
    api_version: str = Field(DEFAULT_API_VERSION, min_length=1, description="Provider API version")

    @field_validator('base_uri')
    @classmethod
    def validate_base_uri(cls, v):
        if not v.startswith(('http://', 'https://')):
            raise ValueError('base_uri must be a valid HTTP/HTTPS URL')
        return v.rstrip('/')


class CredentialsSection(BaseModel):
    """Where to find the bearer token. Exactly one of token or token_env."""
    token: Optional[str] = Field(None, description="Literal access token (avoid committing this)")
    token_env: Optional[str] = Field(None, description="Environment variable holding the access token")

    @model_validator(mode='after')
    def validate_source(self):
        if not self.token and not self.token_env:
            self.token_env = "ARM_ACCESS_TOKEN"
        if self.token and self.token_env:
            raise ValueError('credentials accepts either token or token_env, not both')
        return self


class RequestOptionsSection(BaseModel):
    generate_client_request_id: bool = Field(True, description="Send x-ms-client-request-id")
    accept_language: Optional[str] = Field(DEFAULT_ACCEPT_LANGUAGE, description="accept-language header")
    timeout_s: float = Field(30, gt=0, le=600, description="Transport timeout in seconds")
    user_agent: Optional[str] = Field(None, description="Override for the User-Agent header")


class ClientSettings(BaseModel):
    """Root configuration model for the resource client."""
    client: ClientSection
    credentials: CredentialsSection = Field(default_factory=CredentialsSection)
    request_options: RequestOptionsSection = Field(default_factory=RequestOptionsSection)


def load_and_validate_config(config_path: str) -> ClientSettings:
    """
    Load and validate a client configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Validated ClientSettings object

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid
    """
    import yaml

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {config_path}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigurationError(f"Configuration in {config_path} must be a mapping")

    try:
        return ClientSettings(**raw_config)
    except ValidationError as e:
        # Format validation errors nicely
        error_messages = []
        for error in e.errors():
            field_path = '.'.join(str(loc) for loc in error['loc'])
            error_messages.append(f"  {field_path}: {error['msg']}")

        raise ConfigurationError(
            f"Configuration validation failed for {config_path}:\n" +
            '\n'.join(error_messages)
        ) from e


def config_to_client_config(settings: ClientSettings, environ: Optional[Mapping[str, str]] = None):
    """
    Convert validated settings into the ClientConfig expected by ResourceClient.
    The access token is resolved here, so a missing token fails before any request.
    """
    from arm_blockchain.core.models import ClientConfig, RequestOptions
    from arm_blockchain.http.credentials import StaticTokenCredentials

    environ = os.environ if environ is None else environ
    creds_cfg = settings.credentials

    token = creds_cfg.token
    if not token:
        token = environ.get(creds_cfg.token_env or "", "")
        if not token:
            raise ConfigurationError(f"Access token not found in environment variable {creds_cfg.token_env}")

    opts = settings.request_options
    return ClientConfig(
        credentials=StaticTokenCredentials(token),
        subscription_id=settings.client.subscription_id,
        resource_group=settings.client.resource_group,
        location=settings.client.location,
        base_uri=settings.client.base_uri,
        api_version=settings.client.api_version,
        request_options=RequestOptions(
            generate_client_request_id=opts.generate_client_request_id,
            accept_language=opts.accept_language,
            timeout_s=opts.timeout_s,
            user_agent=opts.user_agent,
        ),
    )
