from __future__ import annotations

PROVIDER_NAME = "Microsoft.Blockchain"

DEFAULT_BASE_URI = "https://management.azure.com"
DEFAULT_API_VERSION = "2018-06-01-preview"
DEFAULT_ACCEPT_LANGUAGE = "en-US"

PORTAL_BASE_URI = "https://portal.azure.com/#@microsoft.onmicrosoft.com"

CONTENT_TYPE = "application/json; charset=utf-8"

HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CLIENT_REQUEST_ID = "x-ms-client-request-id"
HEADER_ACCEPT_LANGUAGE = "accept-language"
HEADER_AUTHORIZATION = "Authorization"

ALLOWED_METHODS = ("GET", "POST", "PUT")

SUCCESS_STATUS = 200
