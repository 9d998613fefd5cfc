"""Integration tests for app configs and fare parameters."""

import pytest

from cbody_ops.config.database import db
from cbody_ops.configs.validations.fare_config_validation import FareConfigValidation
from cbody_ops.models import AppConfig, AuditLog
from cbody_ops.util.exceptions import ValidationException


FARE = {
    "baseFare": 40,
    "freeDistanceKm": 2,
    "tier1PerKm": 10,
    "tier2PerKm": 8,
    "tier3PerKm": 6.5,
    "perMin": 1,
    "tripMultiplier": 2,
    "minFare": 60,
    "roundUpTo": 5,
    "rain_enabled": True,
    "rain_multiplier": 1.2,
    "congestion_enabled": False,
    "congestion_multiplier": 1.1,
    "eta_buffer_min_base": 5,
    "eta_buffer_min_rain": 10,
    "eta_buffer_min_congestion": 8,
}


@pytest.mark.unit
class TestFareValidation:

    def test_valid_params_keep_known_fields(self):
        params = FareConfigValidation().validate(dict(FARE, note="ignored"))

        assert params == FARE

    @pytest.mark.parametrize("field, value, message", [
        ("baseFare", -1, "baseFare must be between 0 and ∞."),
        ("tripMultiplier", 3.5, "tripMultiplier must be between 1 and 3."),
        ("roundUpTo", 0, "roundUpTo must be between 1 and ∞."),
        ("rain_multiplier", 2.1, "rain_multiplier must be between 1 and 2."),
        ("perMin", "1", "perMin must be a number."),
        ("minFare", True, "minFare must be a number."),
        ("rain_enabled", "yes", "rain_enabled must be true or false."),
    ])
    def test_rejects_bad_values(self, field, value, message):
        with pytest.raises(ValidationException) as error:
            FareConfigValidation().validate(dict(FARE, **{field: value}))

        assert error.value.message == message

    def test_missing_field(self):
        params = dict(FARE)
        del params["eta_buffer_min_rain"]

        with pytest.raises(ValidationException):
            FareConfigValidation().validate(params)

    @pytest.mark.parametrize("data", [None, {}, []])
    def test_requires_params(self, data):
        with pytest.raises(ValidationException) as error:
            FareConfigValidation().validate(data)

        assert error.value.message == "Fare parameters are required."


@pytest.fixture
def fare_config(seed):
    return seed.add(AppConfig(
        namespace="fare",
        config_key="params.v1",
        scope="app",
        scope_id="cbody",
        value_json=dict(FARE, baseFare=35),
        version=3,
    ))


@pytest.mark.integration
class TestConfigApi:

    def test_list_active_configs(self, client, headers, seed, fare_config):
        seed.add(AppConfig(namespace="app", config_key="banner", scope_id="cbody", value_json={"on": True}))
        seed.add(AppConfig(namespace="app", config_key="old", scope_id="cbody", is_active=False))

        everything = client.get("/configs/", headers=headers("admin")).get_json()["data"]
        fare_only = client.get("/configs/?namespace=fare", headers=headers("admin")).get_json()["data"]

        assert [item["config_key"] for item in everything["configs"]] == ["banner", "params.v1"]
        assert [item["id"] for item in fare_only["configs"]] == [fare_config.id]

    def test_update_bumps_version(self, client, headers, fare_config):
        response = client.put("/configs/fare", json=FARE, headers=headers("admin"))

        assert response.status_code == 200
        data = response.get_json()["data"]["config"]
        assert data["version"] == 4
        assert data["updated_by"] == "admin-id"
        assert data["value_json"]["baseFare"] == 40

        db.session.expire_all()
        log = AuditLog.query.filter_by(action="update_fare_config").one()
        assert log.payload["changes"] == {"baseFare": 40}

    def test_invalid_update_changes_nothing(self, client, headers, fare_config):
        response = client.put("/configs/fare", json=dict(FARE, tripMultiplier=9), headers=headers("admin"))

        assert response.status_code == 400
        db.session.expire_all()
        assert db.session.get(AppConfig, fare_config.id).version == 3

    def test_missing_fare_config(self, client, headers):
        get = client.get("/configs/fare", headers=headers())
        put = client.put("/configs/fare", json=FARE, headers=headers())

        assert get.status_code == 404
        assert put.status_code == 404

    def test_support_is_forbidden(self, client, headers, fare_config):
        assert client.put("/configs/fare", json=FARE, headers=headers("support")).status_code == 403
