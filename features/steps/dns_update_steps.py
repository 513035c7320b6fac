"""
Step definitions for DNS AAAA Updater scenarios.
"""

from behave import given, then, when

from dns_aaaa_updater.core.dns_manager import DNSManager
from dns_aaaa_updater.exceptions import ProviderError
from dns_aaaa_updater.providers.dns_client import DNSClient
from dns_aaaa_updater.utils.settings import load_settings


def _split(value):
    return [item for item in value.split(",") if item]


@given("the DNS AAAA Updater is configured with the mock provider")
def step_impl(context):
    """Use the in-memory provider for every call."""
    context.config_data = {
        "default_provider": "mock",
        "dns_providers": {"mock": context.provider_config},
    }


@given('the target address is "{address}"')
def step_impl(context, address):
    context.env["IPV6_ADDR"] = address


@given('the domains "{fqdns}"')
def step_impl(context, fqdns):
    context.env["FQDNS"] = fqdns


@given("no domains are configured")
def step_impl(context):
    context.env["FQDNS"] = ""


@given("the zone contains the records:")
def step_impl(context):
    for row in context.table:
        context.provider_config["records"].append(
            {"id": row["id"], "name": row["name"], "type": "AAAA", "content": "2001:db8::1"}
        )


@given("the provider rejects create call {number:d}")
def step_impl(context, number):
    context.provider_config["fail_on_create"] = number


@given('the provider rejects deleting "{record_id}"')
def step_impl(context, record_id):
    context.provider_config.setdefault("fail_delete_ids", []).append(record_id)


@given("DNS updates are skipped")
def step_impl(context):
    context.env["SKIP_DNS"] = "true"


def _run(context, command, dry_run=False):
    settings = load_settings(context.env)
    context.dns_client = DNSClient(context.config_data)
    context.dns_manager = DNSManager(settings, context.config_data, context.dns_client)
    try:
        context.result = context.dns_manager.run(command, dry_run=dry_run)
    except ProviderError as e:
        context.error = str(e)


@when("I run the updater without a command")
def step_impl(context):
    _run(context, None)


@when('I run the "{command}" command')
def step_impl(context, command):
    _run(context, command)


@when('I run the "{command}" command in dry run mode')
def step_impl(context, command):
    _run(context, command, dry_run=True)


@then("the run succeeds")
def step_impl(context):
    assert context.error is None, f"Unexpected error: {context.error}"
    assert context.result is None or context.result.success


@then("the run fails")
def step_impl(context):
    failed = context.error is not None or (
        context.result is not None and not context.result.success
    )
    assert failed, "Expected the run to fail"


@then('create calls are made for "{fqdns}" in order')
def step_impl(context, fqdns):
    names = [args[1] for args in context.dns_client.provider.calls_of("create")]
    assert names == _split(fqdns), f"Create calls were {names}"


@then('every created record is an AAAA record for "{address}"')
def step_impl(context, address):
    for zone, name, record_type, content in context.dns_client.provider.calls_of("create"):
        assert zone == context.test_zone
        assert record_type == "AAAA", f"{name} created as {record_type}"
        assert content == address, f"{name} points to {content}"


@then("{count:d} create calls are made")
def step_impl(context, count):
    calls = context.dns_client.provider.calls_of("create")
    assert len(calls) == count, f"Expected {count} create calls, got {len(calls)}"


@then('only the records "{record_ids}" are deleted')
def step_impl(context, record_ids):
    deleted = [args[1] for args in context.dns_client.provider.calls_of("delete")]
    assert deleted == _split(record_ids), f"Deleted {deleted}"
    remaining = {r.id for r in context.dns_client.provider.records}
    assert not remaining & set(_split(record_ids))


@then('delete calls are made for "{record_ids}"')
def step_impl(context, record_ids):
    deleted = [args[1] for args in context.dns_client.provider.calls_of("delete")]
    assert deleted == _split(record_ids), f"Delete calls were {deleted}"


@then("no records are deleted")
def step_impl(context):
    assert context.dns_client.provider.calls_of("delete") == []


@then("no provider calls are made")
def step_impl(context):
    assert context.dns_client.provider.calls == []
