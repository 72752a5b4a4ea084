# Area: Config Tests
"""Tests for GameConfig and load_config()."""

import pytest
from pydantic import ValidationError

from airline_seats import AirlineSeatsGame, GameConfig, load_config
from airline_seats.config import ENV_MAPPINGS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run each test from an empty directory with no config variables set."""
    for key in ENV_MAPPINGS:
        # setenv first so the variable is removed again even if a .env loads it
        monkeypatch.setenv(key, "unset")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


class TestGameConfig:
    """Tests for the config model."""

    def test_defaults(self):
        config = GameConfig()
        assert config.num_players == 2
        assert config.seed is None

    @pytest.mark.parametrize("players", [1, 5])
    def test_player_bounds(self, players):
        with pytest.raises(ValidationError):
            GameConfig(num_players=players)

    def test_negative_seed(self):
        with pytest.raises(ValidationError):
            GameConfig(seed=-1)

    def test_frozen(self):
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.num_players = 3

    def test_unknown_field(self):
        with pytest.raises(ValidationError):
            GameConfig(rounds=5)

    def test_from_parameters(self):
        assert GameConfig.from_parameters({"players": 4, "seed": 3}) == GameConfig(num_players=4, seed=3)

    def test_from_parameters_unknown_key(self):
        with pytest.raises(ValueError):
            GameConfig.from_parameters({"player": 3})


class TestLoadConfig:
    """Tests for .env and environment loading."""

    def test_defaults_without_env(self):
        assert load_config() == GameConfig()

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("AIRLINE_SEATS_PLAYERS", "3")
        monkeypatch.setenv("AIRLINE_SEATS_SEED", "1234")
        config = load_config()
        assert config.num_players == 3
        assert config.seed == 1234

    def test_reads_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("AIRLINE_SEATS_PLAYERS=4\nAIRLINE_SEATS_SEED=7\n")
        config = load_config()
        assert config == GameConfig(num_players=4, seed=7)

    def test_explicit_env_file(self, tmp_path):
        env_file = tmp_path / "match.env"
        env_file.write_text("AIRLINE_SEATS_PLAYERS=3\n")
        assert load_config(env_file=str(env_file)).num_players == 3

    def test_environment_wins_over_dotenv(self, monkeypatch, tmp_path):
        (tmp_path / ".env").write_text("AIRLINE_SEATS_PLAYERS=4\n")
        monkeypatch.setenv("AIRLINE_SEATS_PLAYERS", "3")
        assert load_config().num_players == 3

    def test_overrides_win_over_environment(self, monkeypatch):
        monkeypatch.setenv("AIRLINE_SEATS_PLAYERS", "3")
        assert load_config(num_players=2).num_players == 2

    def test_invalid_environment_value(self, monkeypatch):
        monkeypatch.setenv("AIRLINE_SEATS_PLAYERS", "many")
        with pytest.raises(ValidationError):
            load_config()

    def test_loaded_config_builds_game(self, monkeypatch):
        monkeypatch.setenv("AIRLINE_SEATS_PLAYERS", "3")
        monkeypatch.setenv("AIRLINE_SEATS_SEED", "5")
        game = AirlineSeatsGame(load_config())
        assert game.num_players() == 3
        assert game.information_state_tensor_shape() == [77]
