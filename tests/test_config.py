import stays.core.config as config_module
from stays.core.config import Settings, get_cors_origins


def test_store_backend_switch():
    assert Settings(STORE_BACKEND="supabase").uses_supabase is True
    assert Settings(STORE_BACKEND="SQL").uses_supabase is False


def test_supabase_configured_needs_url_and_key():
    assert Settings(SUPABASE_URL="https://x.supabase.co", SUPABASE_KEY="k").supabase_configured is True
    assert Settings(SUPABASE_URL="https://x.supabase.co", SUPABASE_KEY="").supabase_configured is False


def test_cors_origins_include_frontend(monkeypatch):
    monkeypatch.setattr(
        config_module,
        "settings",
        Settings(ALLOWED_ORIGINS=["http://localhost:3000"], FRONTEND_URL="https://stays.example.com"),
    )
    assert get_cors_origins() == ["http://localhost:3000", "https://stays.example.com"]


def test_settings_expose_only_used_options():
    assert "TESTING" not in Settings.model_fields
    assert not hasattr(config_module, "is_development")
