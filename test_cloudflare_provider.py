#!/usr/bin/env python3
"""
Tests for the Cloudflare DNS provider.

Requests are served by httpx.MockTransport, so no network access is needed.
"""

import json
import unittest

import httpx

from dns_aaaa_updater.exceptions import APIError, ProviderError, TransportError
from dns_aaaa_updater.providers.cloudflare_provider import CloudflareProvider
from dns_aaaa_updater.providers.dns_client import DNSClient

ZONE = "023e105f4ecef8ad9ca31a8372d0c353"


def envelope(result, result_info=None, success=True, errors=None):
    body = {"success": success, "errors": errors or [], "messages": [], "result": result}
    if result_info is not None:
        body["result_info"] = result_info
    return body


def record(record_id, name, content="2001:db8::1"):
    return {"id": record_id, "name": name, "type": "AAAA", "content": content,
            "proxied": False, "ttl": 1}


class CloudflareTestCase(unittest.TestCase):
    def setUp(self):
        self.requests = []

    def provider(self, handler, **config):
        def serve(request):
            self.requests.append(request)
            return handler(request)

        config.setdefault("email", "admin@example.com")
        config.setdefault("api_key", "secret")
        provider = CloudflareProvider(config, transport=httpx.MockTransport(serve))
        self.addCleanup(provider.close)
        return provider


class TestCloudflareRequests(CloudflareTestCase):
    """Test request shapes and authentication."""

    def test_auth_headers(self):
        provider = self.provider(lambda request: httpx.Response(200, json=envelope([])))
        provider.list_records(ZONE)

        request = self.requests[0]
        self.assertEqual(request.headers["X-Auth-Email"], "admin@example.com")
        self.assertEqual(request.headers["X-Auth-Key"], "secret")

    def test_create_record_payload(self):
        def handler(request):
            return httpx.Response(
                200, json=envelope(record("abc", "a.example.com", "2001:db8::10"))
            )

        provider = self.provider(handler)
        created = provider.create_record(ZONE, "a.example.com", "AAAA", "2001:db8::10")

        request = self.requests[0]
        self.assertEqual(request.method, "POST")
        self.assertEqual(
            request.url,
            f"https://api.cloudflare.com/client/v4/zones/{ZONE}/dns_records",
        )
        self.assertEqual(
            json.loads(request.content),
            {"type": "AAAA", "name": "a.example.com", "content": "2001:db8::10"},
        )
        self.assertEqual(created.id, "abc")
        self.assertEqual(created.content, "2001:db8::10")

    def test_delete_record(self):
        provider = self.provider(
            lambda request: httpx.Response(200, json=envelope({"id": "abc"}))
        )

        self.assertEqual(provider.delete_record(ZONE, "abc"), "abc")
        request = self.requests[0]
        self.assertEqual(request.method, "DELETE")
        self.assertEqual(request.url.path, f"/client/v4/zones/{ZONE}/dns_records/abc")

    def test_custom_base_url(self):
        provider = self.provider(
            lambda request: httpx.Response(200, json=envelope([])),
            base_url="http://localhost:8080/api/",
        )
        provider.list_records(ZONE)
        self.assertEqual(
            str(self.requests[0].url).split("?")[0],
            f"http://localhost:8080/api/zones/{ZONE}/dns_records",
        )


class TestCloudflareListing(CloudflareTestCase):
    """Test record listing and pagination."""

    def test_single_page(self):
        def handler(request):
            return httpx.Response(
                200,
                json=envelope(
                    [record("1", "a.example.com"), record("2", "b.example.com")],
                    {"page": 1, "per_page": 1000, "count": 2, "total_count": 2,
                     "total_pages": 1},
                ),
            )

        records = self.provider(handler).list_records(ZONE)

        self.assertEqual([r.name for r in records], ["a.example.com", "b.example.com"])
        self.assertEqual(len(self.requests), 1)
        self.assertEqual(self.requests[0].url.params["per_page"], "1000")
        self.assertEqual(self.requests[0].url.params["page"], "1")

    def test_follows_every_page(self):
        pages = {
            "1": [record("1", "a.example.com"), record("2", "b.example.com")],
            "2": [record("3", "c.example.com"), record("4", "d.example.com")],
            "3": [record("5", "e.example.com")],
        }

        def handler(request):
            page = request.url.params["page"]
            return httpx.Response(
                200,
                json=envelope(
                    pages[page],
                    {"page": int(page), "per_page": 2, "count": len(pages[page]),
                     "total_count": 5, "total_pages": 3},
                ),
            )

        records = self.provider(handler).list_records(ZONE, per_page=2)

        self.assertEqual([r.id for r in records], ["1", "2", "3", "4", "5"])
        self.assertEqual(
            [request.url.params["page"] for request in self.requests], ["1", "2", "3"]
        )

    def test_missing_result_info_reads_one_page(self):
        provider = self.provider(
            lambda request: httpx.Response(200, json=envelope([record("1", "a.example.com")]))
        )
        self.assertEqual(len(provider.list_records(ZONE)), 1)
        self.assertEqual(len(self.requests), 1)

    def test_dns_client_uses_configured_page_size(self):
        def handler(request):
            self.requests.append(request)
            return httpx.Response(200, json=envelope([]))

        client = DNSClient(
            {"default_provider": "cloudflare",
             "dns_providers": {"cloudflare": {"per_page": 250}}},
            {"email": "admin@example.com", "api_key": "secret"},
        )
        client.provider._http.close()
        client.provider._http = httpx.Client(
            base_url=client.provider.base_url, transport=httpx.MockTransport(handler)
        )
        self.addCleanup(client.close)

        client.list_records(ZONE)
        self.assertEqual(self.requests[0].url.params["per_page"], "250")


class TestCloudflareErrors(CloudflareTestCase):
    """Test failure reporting."""

    def test_api_error(self):
        def handler(request):
            return httpx.Response(
                400,
                json=envelope(
                    None,
                    success=False,
                    errors=[{"code": 81057, "message": "Record already exists."}],
                ),
            )

        provider = self.provider(handler)
        with self.assertRaises(APIError) as ctx:
            provider.create_record(ZONE, "a.example.com", "AAAA", "2001:db8::10")

        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.errors, ["81057: Record already exists."])
        self.assertIn("Record already exists.", str(ctx.exception))

    def test_unsuccessful_envelope_with_200(self):
        provider = self.provider(
            lambda request: httpx.Response(200, json=envelope(None, success=False))
        )
        with self.assertRaises(APIError):
            provider.delete_record(ZONE, "abc")

    def test_non_json_response(self):
        provider = self.provider(lambda request: httpx.Response(502, text="Bad gateway"))
        with self.assertRaises(APIError) as ctx:
            provider.list_records(ZONE)
        self.assertEqual(ctx.exception.status_code, 502)

    def test_create_without_result_is_an_api_error(self):
        provider = self.provider(lambda request: httpx.Response(200, json=envelope(None)))
        with self.assertRaises(APIError) as ctx:
            provider.create_record(ZONE, "a.example.com", "AAAA", "2001:db8::10")
        self.assertIn("malformed record", str(ctx.exception))

    def test_malformed_listed_record_is_an_api_error(self):
        provider = self.provider(
            lambda request: httpx.Response(200, json=envelope([{"name": "a.example.com"}]))
        )
        with self.assertRaises(APIError):
            provider.list_records(ZONE)

    def test_non_object_body_is_an_api_error(self):
        provider = self.provider(lambda request: httpx.Response(200, json=[record("1", "a.example.com")]))
        with self.assertRaises(APIError) as ctx:
            provider.list_records(ZONE)
        self.assertEqual(ctx.exception.status_code, 200)

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        provider = self.provider(handler)
        with self.assertRaises(TransportError):
            provider.create_record(ZONE, "a.example.com", "AAAA", "2001:db8::10")

    def test_errors_share_a_base_class(self):
        self.assertTrue(issubclass(APIError, ProviderError))
        self.assertTrue(issubclass(TransportError, ProviderError))


if __name__ == "__main__":
    unittest.main(verbosity=2)
