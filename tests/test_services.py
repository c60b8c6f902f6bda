"""
Service layer: login, subscriptions, client self-service and admin actions.
"""
import pytest

from opticore_api.app.core.errors import AuthorizationError, NotFoundError, ValidationError
from opticore_api.app.models import ClientStatus, Role, Session
from opticore_api.app.services.admin_service import AdminService
from opticore_api.app.services.client_registry import ClientRegistry
from opticore_api.app.services.client_service import ClientService
from opticore_api.app.services.session_service import SessionService
from opticore_api.app.services.token_store import TokenStore


@pytest.fixture
def registry():
    return ClientRegistry()


@pytest.fixture
def clients(registry):
    return ClientService(registry, days_until_renewal=5)


@pytest.fixture
def admin(registry):
    return AdminService(registry)


def owner_of(client_id):
    return Session(token="t", identity="a@a.com", role=Role.CLIENT, client_ref=client_id)


# ---------------------------------------------------------------------------
# SessionService
# ---------------------------------------------------------------------------

def test_login_resolves_to_given_role_and_client():
    store = TokenStore()
    token = SessionService(store).login("a@a.com", "client", 4)
    session = store.resolve(token)
    assert session.role is Role.CLIENT
    assert session.client_ref == 4
    assert session.identity == "a@a.com"


@pytest.mark.parametrize("client_id", [None, 0])
def test_login_without_client(client_id):
    store = TokenStore()
    token = SessionService(store).login("admin@a.com", "admin", client_id)
    assert store.resolve(token).client_ref is None


@pytest.mark.parametrize("email, role", [(None, "client"), ("", "client"), ("a@a.com", None), ("a@a.com", "")])
def test_login_requires_email_and_role(email, role):
    with pytest.raises(ValidationError, match="email and role are required"):
        SessionService(TokenStore()).login(email, role)


def test_login_rejects_unknown_role():
    store = TokenStore()
    with pytest.raises(ValidationError):
        SessionService(store).login("a@a.com", "superuser")
    assert len(store) == 0


# ---------------------------------------------------------------------------
# ClientService
# ---------------------------------------------------------------------------

def test_create_subscription_ids(clients):
    assert [clients.create_subscription(f"C{i}", "PRO") for i in range(3)] == [1, 2, 3]


@pytest.mark.parametrize("name, plan", [(None, "PRO"), ("", "PRO"), ("Acme", None), ("Acme", "")])
def test_create_subscription_requires_name_and_plan(clients, registry, name, plan):
    with pytest.raises(ValidationError, match="name and plan are required"):
        clients.create_subscription(name, plan)
    assert len(registry) == 0


def test_dashboard_returns_client_and_metrics(clients):
    client_id = clients.create_subscription("Acme", "PRO")
    client, metrics = clients.get_dashboard(client_id, owner_of(client_id))

    assert client.name == "Acme"
    assert 0 <= metrics["leads_processed"] < 1000
    assert 0 <= metrics["messages_processed"] < 500
    assert metrics["days_until_renewal"] == 5


def test_dashboard_forbidden_for_other_client_even_if_it_exists(clients):
    first = clients.create_subscription("Acme", "PRO")
    second = clients.create_subscription("Globex", "PRO")
    with pytest.raises(AuthorizationError):
        clients.get_dashboard(second, owner_of(first))


def test_dashboard_ownership_checked_before_existence(clients):
    with pytest.raises(AuthorizationError):
        clients.get_dashboard(99, owner_of(1))
    with pytest.raises(NotFoundError):
        clients.get_dashboard(99, owner_of(99))


def test_dashboard_forbidden_without_client_ref(clients):
    client_id = clients.create_subscription("Acme", "PRO")
    with pytest.raises(AuthorizationError):
        clients.get_dashboard(client_id, owner_of(None))


def test_toggle_service(clients, registry):
    client_id = clients.create_subscription("Acme", "START")
    services = clients.toggle_service(client_id, owner_of(client_id), "crm_integration", True)
    assert services["crm_integration"] is True
    assert registry.get(client_id).services["crm_integration"] is True


@pytest.mark.parametrize("enabled", [None, 1, 0, "true", "false"])
def test_toggle_requires_boolean(clients, registry, enabled):
    client_id = clients.create_subscription("Acme", "PRO")
    with pytest.raises(ValidationError, match="service and enabled are required"):
        clients.toggle_service(client_id, owner_of(client_id), "telegram_bot", enabled)
    assert registry.get(client_id).services["telegram_bot"] is True


def test_toggle_unknown_service_leaves_map_unchanged(clients, registry):
    client_id = clients.create_subscription("Acme", "START")
    before = registry.get(client_id).services
    with pytest.raises(ValidationError, match="Unknown service"):
        clients.toggle_service(client_id, owner_of(client_id), "fax_bot", True)
    assert registry.get(client_id).services == before


def test_toggle_checks_owner_then_existence(clients):
    client_id = clients.create_subscription("Acme", "PRO")
    with pytest.raises(AuthorizationError):
        clients.toggle_service(client_id, owner_of(client_id + 1), "fax_bot", "nope")
    with pytest.raises(NotFoundError):
        clients.toggle_service(42, owner_of(42), "telegram_bot", True)


# ---------------------------------------------------------------------------
# AdminService
# ---------------------------------------------------------------------------

def test_pause_and_resume(clients, admin):
    client_id = clients.create_subscription("Acme", "PRO")
    assert admin.set_status(client_id, "pause").status is ClientStatus.PAUSED
    assert admin.set_status(client_id, "pause").status is ClientStatus.PAUSED
    assert admin.set_status(client_id, "resume").status is ClientStatus.ACTIVE


def test_unknown_action(clients, admin):
    client_id = clients.create_subscription("Acme", "PRO")
    with pytest.raises(ValidationError, match="Invalid action"):
        admin.set_status(client_id, "delete")


def test_unknown_client_reported_before_action(admin):
    with pytest.raises(NotFoundError):
        admin.set_status(5, "delete")


def test_paused_client_keeps_dashboard_access(clients, admin):
    client_id = clients.create_subscription("Acme", "PRO")
    admin.set_status(client_id, "pause")
    client, _ = clients.get_dashboard(client_id, owner_of(client_id))
    assert client.status is ClientStatus.PAUSED


def test_list_clients(clients, admin):
    assert admin.list_clients() == []
    clients.create_subscription("Acme", "PRO")
    clients.create_subscription("Globex", "START")
    assert {c.name for c in admin.list_clients()} == {"Acme", "Globex"}


# ---------------------------------------------------------------------------
# Path identifiers as received from the URL
# ---------------------------------------------------------------------------

def test_string_ids_are_parsed(clients, admin):
    client_id = clients.create_subscription("Acme", "PRO")
    client, _ = clients.get_dashboard(str(client_id), owner_of(client_id))
    assert client.id == client_id
    assert admin.set_status(str(client_id), "pause").status is ClientStatus.PAUSED


def test_non_numeric_id_is_forbidden_for_clients(clients):
    client_id = clients.create_subscription("Acme", "PRO")
    with pytest.raises(AuthorizationError):
        clients.get_dashboard("abc", owner_of(client_id))
    with pytest.raises(AuthorizationError):
        clients.toggle_service("abc", owner_of(client_id), "telegram_bot", False)


def test_non_numeric_id_is_not_found_for_admin(clients, admin):
    clients.create_subscription("Acme", "PRO")
    with pytest.raises(NotFoundError):
        admin.set_status("abc", "pause")
