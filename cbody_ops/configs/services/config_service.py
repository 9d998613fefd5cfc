"""
Config Service

Handles:
    - Active runtime configs
    - Fare parameters read / update
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.app_config import AppConfig

# Exceptions
from ...util.exceptions import ServiceException, NotFoundException

# App Messages
from ...util import messages

# Audit
from ...util.audit import record_audit_log

# Helpers
from ...util.helpers import format_datetime

logger = logging.getLogger(__name__)





class ConfigService:

    def list_configs(self, args) -> dict:
        query = AppConfig.query.filter(AppConfig.is_active.is_(True))

        namespace = (args.get("namespace") or "").strip()
        if namespace:
            query = query.filter(AppConfig.namespace == namespace)

        configs = query.order_by(AppConfig.namespace, AppConfig.config_key).all()

        return {"configs": [self.serialize(config) for config in configs]}



    def _fare_config(self) -> AppConfig:
        config = AppConfig.query.filter_by(
            namespace = constants.FARE_CONFIG_NAMESPACE,
            config_key = constants.FARE_CONFIG_KEY,
            scope = constants.FARE_CONFIG_SCOPE,
            scope_id = constants.FARE_CONFIG_SCOPE_ID
        ).first()

        if not config:
            raise NotFoundException(messages.ERROR['FARE_CONFIG_NOT_FOUND'])

        return config


    def get_fare_config(self) -> dict:
        return self.serialize(self._fare_config())



    def update_fare_config(self, operator, params: dict) -> dict:
        """
        Replace the fare parameters

        Args:
            operator (AdminProfile)
            params (dict): validated fare parameters

        Returns:
            dict: updated config with its new version
        """

        config = self._fare_config()
        previous = dict(config.value_json or {})

        try:
            config.value_json = dict(params)
            config.version = (config.version or 0) + 1
            config.updated_by = operator.id
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "CONFIG_UPDATE_FAILED",
                message = messages.ERROR['CONFIG_UPDATE_FAILED'],
                details = str(errors)
            )

        logger.info("⚙️ Fare config updated to version %s by %s", config.version, operator.id)

        record_audit_log(
            admin_id = operator.id,
            action = "update_fare_config",
            target_type = "app_config",
            target_id = config.id,
            payload = {
                "version": config.version,
                "changes": {key: value for key, value in params.items() if previous.get(key) != value}
            }
        )

        return {"config": self.serialize(config), "message": messages.SUCCESS['CONFIG_UPDATED']}



    @staticmethod
    def serialize(config: AppConfig) -> dict:
        return {
            "id": config.id,
            "namespace": config.namespace,
            "config_key": config.config_key,
            "scope": config.scope,
            "scope_id": config.scope_id,
            "value_json": config.value_json,
            "description": config.description,
            "is_active": config.is_active,
            "version": config.version,
            "updated_by": config.updated_by,
            "updated_at": format_datetime(config.updated_at)
        }
