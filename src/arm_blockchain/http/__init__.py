from arm_blockchain.http.client import HttpClient, RequestsHttpClient
from arm_blockchain.http.credentials import BearerTokenCredentials, Credentials, StaticTokenCredentials
from arm_blockchain.http.response import HttpResponse

__all__ = [
    "BearerTokenCredentials",
    "Credentials",
    "HttpClient",
    "HttpResponse",
    "RequestsHttpClient",
    "StaticTokenCredentials",
]
