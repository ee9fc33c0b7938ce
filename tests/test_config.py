import pytest

from app.core.config import Settings, parse_list_from_env, settings


class TestParseListFromEnv:
    """Tests pour la fonction utilitaire parse_list_from_env."""

    def test_parse_direct(self):
        """Test avec une liste Python directe."""
        assert parse_list_from_env(["a", "b"], "test_field") == ["a", "b"]

    def test_parse_comma_separated_with_spaces(self):
        """Test avec format virgules et espaces."""
        result = parse_list_from_env("  localhost , clinic.local ", "TRUSTED_HOSTS")
        assert result == ["localhost", "clinic.local"]

    def test_parse_json_format(self):
        """Test avec format JSON."""
        result = parse_list_from_env('["http://localhost:3000"]', "ALLOWED_ORIGINS")
        assert result == ["http://localhost:3000"]

    def test_parse_empty_string(self):
        """Test avec chaîne vide."""
        assert parse_list_from_env("   ", "test_field") == []

    def test_empty_values_filtered(self):
        """Test que les valeurs vides sont filtrées."""
        assert parse_list_from_env("a,,b,  ,c", "test_field") == ["a", "b", "c"]

    def test_invalid_json_format(self):
        """Test avec format JSON invalide."""
        with pytest.raises(ValueError, match="Format JSON invalide pour test_field"):
            parse_list_from_env('["a", "b"', "test_field")

    def test_invalid_type(self):
        """Test avec type invalide."""
        with pytest.raises(ValueError, match="Valeur invalide pour test_field"):
            parse_list_from_env(123, "test_field")  # type: ignore


class TestSettings:
    """Tests pour les valeurs de configuration."""

    def test_trusted_hosts_validator(self):
        result = Settings.assemble_trusted_hosts("localhost,*.clinic.com.br")
        assert result == ["localhost", "*.clinic.com.br"]

    def test_pagination_defaults(self):
        """La taille de page par défaut est 20, bornée à 100."""
        assert settings.DEFAULT_PAGE_SIZE == 20
        assert settings.MAX_PAGE_SIZE == 100

    def test_api_prefix(self):
        assert settings.get_api_prefix() == "/api/v1"
        assert settings.get_api_prefix("v2") == "/api/v2"

    def test_test_environment_uses_sqlite(self):
        """Le conftest racine bascule la base sur SQLite en mémoire."""
        assert settings.SQLALCHEMY_DATABASE_URI.startswith("sqlite+aiosqlite")
