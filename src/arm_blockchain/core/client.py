from __future__ import annotations

import json
import uuid
from typing import Any, Optional

from arm_blockchain.core.constants import (
    ALLOWED_METHODS,
    CONTENT_TYPE,
    HEADER_ACCEPT_LANGUAGE,
    HEADER_CLIENT_REQUEST_ID,
    HEADER_CONTENT_TYPE,
    PORTAL_BASE_URI,
    PROVIDER_NAME,
    SUCCESS_STATUS,
)
from arm_blockchain.core.errors import DeserializationError, TransportError, UnsuccessfulStatusError
from arm_blockchain.core.models import ClientConfig, NameAvailability, RequestSpec
from arm_blockchain.host.services import HostServices
from arm_blockchain.http.client import HttpClient, RequestsHttpClient
from arm_blockchain.resources.consortium import ConsortiumResource
from arm_blockchain.resources.member import MemberResource
from arm_blockchain.resources.sku import SkuResource
from arm_blockchain.resources.transaction_node import TransactionNodeResource
from arm_blockchain.utils.logging import get_logger


class ResourceClient:
    """
    Client for the Microsoft.Blockchain resource provider.

    Every operation issues exactly one request and either returns the parsed
    JSON body or raises a ResourceClientError.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[HttpClient] = None,
        services: Optional[HostServices] = None,
    ):
        """
        Args:
            config: Immutable client configuration.
            transport: HTTP transport; defaults to a requests-based client.
            services: Host capabilities (telemetry, notifications, browser opener).
        """
        self.config = config
        self.transport = transport or RequestsHttpClient(
            timeout_s=config.request_options.timeout_s,
            user_agent=config.request_options.user_agent,
        )
        self.services = services or HostServices()
        self.log = get_logger("arm_blockchain.client")

        self.member_resource = MemberResource(self)
        self.transaction_node_resource = TransactionNodeResource(self)
        self.consortium_resource = ConsortiumResource(self)
        self.sku_resource = SkuResource(self)

    def build_url(self, path: str, use_resource_group: bool = False, use_blockchain_members: bool = False) -> str:
        """Build a fully qualified provider URL. Path segments are not escaped."""
        cfg = self.config
        resource_group = f"resourceGroups/{cfg.resource_group}/" if use_resource_group else ""
        blockchain_members = "blockchainMembers/" if use_blockchain_members else ""

        return (
            f"{cfg.base_uri}/subscriptions/{cfg.subscription_id}/{resource_group}"
            f"providers/{PROVIDER_NAME}/{blockchain_members}{path}?api-version={cfg.api_version}"
        )

    def build_request(self, url: str, method: str, body: Optional[str] = None) -> RequestSpec:
        """Build a fresh request with the configured headers."""
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        options = self.config.request_options
        headers = {HEADER_CONTENT_TYPE: CONTENT_TYPE}
        if options.generate_client_request_id:
            headers[HEADER_CLIENT_REQUEST_ID] = str(uuid.uuid4())
        if options.accept_language:
            headers[HEADER_ACCEPT_LANGUAGE] = options.accept_language

        return RequestSpec(url=url, method=method, headers=headers, body=body)

    def send_request(self, req: RequestSpec) -> Any:
        """
        Sign and send a request, then interpret the response.

        Only HTTP 200 counts as success here; other 2xx codes are raised as
        UnsuccessfulStatusError like any other status.

        Raises:
            TransportError: No response was received. The operator is notified.
            UnsuccessfulStatusError: Status other than 200; message is the raw body.
            DeserializationError: Status 200 but the body is not valid JSON.
        """
        telemetry = self.services.telemetry
        self.log.debug("%s %s", req.method, req.url)

        try:
            resp = self.transport.send(self.config.credentials.sign_request(req))
        except TransportError as e:
            telemetry.send_exception(e)
            self.log.error("%s %s failed: %s", req.method, req.url, e)
            self.services.notifier.show_error_message(str(e))
            raise

        if resp.status_code != SUCCESS_STATUS:
            error = UnsuccessfulStatusError(resp.text, resp.status_code, resp.status_message)
            telemetry.send_exception(error)
            self.log.warning("%s %s returned status %s", req.method, req.url, resp.status_code)
            raise error

        try:
            return json.loads(resp.text)
        except ValueError as e:
            error = DeserializationError(f"Error {e} occurred in deserialize the responseBody")
            telemetry.send_exception(error)
            raise error from e

    def get_members(self, member_name: str) -> Any:
        url = self.build_url(f"{member_name}/ConsortiumMembers", True, True)
        return self.send_request(self.build_request(url, "GET"))

    def get_consortia(self) -> Any:
        url = self.build_url("", True, True)
        return self.send_request(self.build_request(url, "GET"))

    def get_transaction_nodes(self, member_name: str) -> Any:
        url = self.build_url(f"{member_name}/transactionNodes", True, True)
        return self.send_request(self.build_request(url, "GET"))

    def get_transaction_node_access_keys(self, member_name: str, node_name: str) -> Any:
        """The default transaction node shares the member's name and has its keys on the member."""
        if member_name == node_name:
            path = f"{member_name}/listApikeys"
        else:
            path = f"{member_name}/transactionNodes/{node_name}/listApikeys"

        url = self.build_url(path, True, True)
        return self.send_request(self.build_request(url, "POST"))

    def get_skus(self) -> Any:
        url = self.build_url("skus")
        return self.send_request(self.build_request(url, "GET"))

    def check_existence(self, name: str, type: str) -> NameAvailability:
        """Check whether `name` is available for a resource of the given type."""
        url = self.build_url(f"locations/{self.config.location}/checkNameAvailability")
        body = json.dumps({"name": name, "type": type})

        result = self.send_request(self.build_request(url, "POST", body))
        if not isinstance(result, dict):
            error = DeserializationError(f"Expected a JSON object from checkNameAvailability, got {result.__class__.__name__}")
            self.services.telemetry.send_exception(error)
            raise error
        return NameAvailability.from_json(result)

    def create_consortium(self, member_name: str, body: str) -> None:
        """
        Create a consortium through its first member and open it in the portal.

        Unlike send_request, any 2xx status is accepted here since ARM answers
        creations with 201.
        """
        url = self.build_url(member_name, True, True)
        resource_path = url[url.index("subscriptions"):url.index("?")]
        req = self.build_request(url, "PUT", body)
        telemetry = self.services.telemetry

        try:
            resp = self.transport.send(self.config.credentials.sign_request(req))
        except TransportError as e:
            telemetry.send_exception(e)
            self.log.error("CreateConsortium failed: %s", e)
            raise

        if resp.status_code < 200 or resp.status_code > 299:
            error = UnsuccessfulStatusError(resp.text, resp.status_code, resp.status_message)
            telemetry.send_exception(error)
            self.log.error("%s(%s): %s", resp.status_message, resp.status_code, resp.text)
            self.services.notifier.show_error_message("Failed to run command - CreateConsortium")
            raise error

        self.services.opener.open_external(f"{PORTAL_BASE_URI}/resource/{resource_path}")
