"""
Step definitions for zone registry integration tests.
"""

from behave import given, when, then

from slave_zone_manager.core.context import AppContext
from slave_zone_manager.core.errors import ZoneParseError, ZoneRegistryError
from slave_zone_manager.utils.config import load_config


def start_zone_manager(context):
    config = load_config(str(context.test_config_file))
    context.app_context = AppContext.from_config(config)
    context.registry = context.app_context.registry
    try:
        context.app_context.load_zones()
        context.startup_error = None
    except ZoneParseError as e:
        context.startup_error = e


def rndc_commands(context):
    """Commands received by the stand-in rndc script."""
    if not context.rndc_log.exists():
        return []
    return context.rndc_log.read_text().splitlines()


def zone_db_file(context, zone):
    return context.scenario_dir / "slave" / f"{zone}.db"


@given("BIND's zone file contains")
def step_impl(context):
    """Write BIND's zone file."""
    (context.scenario_dir / context.test_config["zone_file"]).write_text(context.text + "\n")


@given("the zone manager started with an empty zone file")
def step_impl(context):
    """Start the zone manager with no zones."""
    (context.scenario_dir / context.test_config["zone_file"]).write_text("")
    start_zone_manager(context)
    assert context.startup_error is None, f"Startup failed: {context.startup_error}"


@when("the zone manager starts")
def step_impl(context):
    """Start the zone manager."""
    start_zone_manager(context)


@given('master "{master}" added zone "{zone}"')
def step_impl(context, master, zone):
    """Add a zone as part of the scenario setup."""
    context.registry.add_zone(master, zone)


@given('the zone database for "{zone}" exists')
def step_impl(context, zone):
    """Create the zone database BIND would have transferred."""
    zone_db_file(context, zone).write_text("; zone data\n")


@given("rndc fails")
def step_impl(context):
    """Make every further rndc command fail."""
    context.rndc_fail.write_text("")


@when('master "{master}" adds zone "{zone}"')
def step_impl(context, master, zone):
    """Add a zone on behalf of a master."""
    try:
        context.registry.add_zone(master, zone)
        context.error = None
    except ZoneRegistryError as e:
        context.error = e


@when('master "{master}" removes zone "{zone}"')
def step_impl(context, master, zone):
    """Remove a zone on behalf of a master."""
    try:
        context.registry.remove_zone(master, zone)
        context.error = None
    except ZoneRegistryError as e:
        context.error = e


@then("the request succeeds")
def step_impl(context):
    """Verify that the last operation succeeded."""
    assert context.error is None, f"Request failed: {context.error}"


@then('the request fails with "{error}"')
def step_impl(context, error):
    """Verify that the last operation failed with the given error."""
    assert context.error is not None, "Request succeeded when it should have failed"
    assert type(context.error).__name__ == error, f"Got unexpected error: {context.error!r}"


@then('zone "{zone}" is assigned to master "{master}"')
def step_impl(context, zone, master):
    """Verify the master of a zone."""
    zone_map = context.registry.get_zone_map()
    assert zone_map.get(zone) == master, f"Unexpected zone map: {zone_map}"
    assert zone in context.registry.get_zones(master)


@then('master "{master}" has no zones')
def step_impl(context, master):
    """Verify that a master owns nothing."""
    assert context.registry.get_zones(master) == set()
    assert master not in context.registry.get_masters()


@then('startup fails mentioning "{text}"')
def step_impl(context, text):
    """Verify that loading the zone file failed."""
    assert context.startup_error is not None, "Startup succeeded when it should have failed"
    assert text in str(context.startup_error), f"Got unexpected error: {context.startup_error}"


@then("rndc was not called")
def step_impl(context):
    """Verify that BIND was left alone."""
    assert rndc_commands(context) == [], f"rndc was called: {rndc_commands(context)}"


@then('rndc received "{command}"')
def step_impl(context, command):
    """Verify that rndc received a command."""
    assert command in rndc_commands(context), f"rndc received: {rndc_commands(context)}"


@then('the zone database for "{zone}" is gone')
def step_impl(context, zone):
    """Verify that the zone database was deleted."""
    assert not zone_db_file(context, zone).exists()
