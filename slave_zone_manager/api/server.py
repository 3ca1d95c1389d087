"""
Zone API Blueprint - HTTP Basic Authentication.

Lets masters delegate slave zones to this server. The caller's remote
address is the master every operation acts on.

Routes:
- GET       /              - List every zone with its master
- GET       /list/         - List the caller's zones
- GET|POST  /add/<zone>    - Add a slave zone for the caller
- GET|POST  /remove/<zone> - Remove one of the caller's slave zones
"""
import hmac
import logging
from functools import wraps

from flask import Blueprint, Flask, Response, current_app, g, request

from ..core.context import AppContext
from ..core.errors import (
    DuplicateZoneError,
    HookExecutionError,
    MasterNotFoundError,
    ZoneNotFoundError,
    ZoneNotOwnedByMasterError,
    ZoneRegistryError,
)

logger = logging.getLogger(__name__)

zone_api_bp = Blueprint('zone_api', __name__)

CONTEXT_KEY = 'slave_zone_manager'

ERROR_STATUS = {
    DuplicateZoneError: 409,
    ZoneNotFoundError: 404,
    MasterNotFoundError: 404,
    ZoneNotOwnedByMasterError: 403,
    HookExecutionError: 500,
}


def create_app(context: AppContext) -> Flask:
    """Create the Flask application serving the zone API."""
    app = Flask(__name__)
    app.extensions[CONTEXT_KEY] = context
    app.register_blueprint(zone_api_bp)
    return app


def get_context() -> AppContext:
    return current_app.extensions[CONTEXT_KEY]


def text_response(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype='text/plain')


def is_valid_user(username: str, password: str) -> bool:
    """Check credentials against the configured clients."""
    if username is None or password is None:
        return False

    for client in get_context().config.get('clients') or []:
        expected_username = client.get('username')
        expected_password = client.get('password')
        if expected_username is None or expected_password is None:
            continue
        if hmac.compare_digest(str(expected_username).encode(), username.encode()) and \
                hmac.compare_digest(str(expected_password).encode(), password.encode()):
            return True
    return False


def require_auth(f):
    """
    Decorator for routes requiring HTTP basic authentication.

    Sets g.master to the caller's address on success.
    Returns 403 if the caller's address is unknown and 401 on bad credentials.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        host = request.remote_addr
        if not host:
            logger.warning('Unable to establish identity of connection')
            return text_response('Sorry, I am unable to establish your origin.', 403)

        auth = request.authorization
        if auth is None or not is_valid_user(auth.username, auth.password):
            logger.warning(f'Unauthorized request from {host}')
            response = text_response('Invalid credentials.', 401)
            realm = get_context().config.get('realm', 'bdns')
            response.headers['WWW-Authenticate'] = f'Basic realm="{realm}"'
            return response

        logger.info(f'[{host}] {request.method} {request.path}')
        g.master = host
        return f(*args, **kwargs)

    return decorated_function


def error_status(error: ZoneRegistryError) -> int:
    for error_class, status in ERROR_STATUS.items():
        if isinstance(error, error_class):
            return status
    return 500


def invalid_zone(zone: str) -> bool:
    return not zone or '/' in zone


@zone_api_bp.route('/')
@require_auth
def list_all_zones():
    """List every zone with its master, one per line."""
    zone_map = get_context().registry.get_zone_map()
    lines = [f'{zone}\t{master}\n' for zone, master in sorted(zone_map.items())]
    return text_response(''.join(lines))


@zone_api_bp.route('/list/')
@require_auth
def list_zones():
    """List the caller's zones, one per line."""
    zones = get_context().registry.get_zones(g.master)
    return text_response(''.join(f'{zone}\n' for zone in sorted(zones)))


@zone_api_bp.route('/add/', defaults={'zone': ''}, methods=['GET', 'POST'])
@zone_api_bp.route('/add/<path:zone>', methods=['GET', 'POST'])
@require_auth
def add_zone(zone):
    if invalid_zone(zone):
        logger.warning(f'Invalid zone "{zone}"')
        return text_response('Invalid zone.', 400)

    try:
        get_context().registry.add_zone(g.master, zone)
    except ZoneRegistryError as e:
        msg = f'Error adding zone {zone} ({e})'
        logger.error(msg)
        return text_response(msg, error_status(e))

    logger.info(f'Added zone {zone} for master {g.master}')
    return text_response('OK')


@zone_api_bp.route('/remove/', defaults={'zone': ''}, methods=['GET', 'POST'])
@zone_api_bp.route('/remove/<path:zone>', methods=['GET', 'POST'])
@require_auth
def remove_zone(zone):
    if invalid_zone(zone):
        logger.warning(f'Invalid zone "{zone}"')
        return text_response('Invalid zone.', 400)

    try:
        get_context().registry.remove_zone(g.master, zone)
    except ZoneRegistryError as e:
        msg = f'Error removing zone {zone} ({e})'
        logger.error(msg)
        return text_response(msg, error_status(e))

    logger.info(f'Removed zone {zone} for master {g.master}')
    return text_response('OK')
