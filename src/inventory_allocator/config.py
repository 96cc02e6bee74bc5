from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerDescriptionSettings(BaseSettings):
    API_STR: str = "/v1"

    OPENAPI_URL: str = f"{API_STR}/openapi.json"

    REST_SERVICE_NAME: str = "inventory-allocator"
    REST_SERVICE_DESCRIPTION: str = "우선순위 창고 목록에 주문을 나눠 할당하는 서비스"
    REST_SERVICE_VERSION: str = "0.1.0"


class AllocationSettings(BaseSettings):
    KEEP_IDLE_WAREHOUSES: bool = Field(
        validation_alias="ALLOCATION_KEEP_IDLE_WAREHOUSES",
        default=False,
    )


class NotificationSettings(BaseSettings):
    STOCK_ADMIN: str = Field(
        validation_alias="NOTIFICATIONS_STOCK_ADMIN",
        default="stock_admin@example.com",
    )


class Settings(BaseSettings):
    DEBUG: bool = Field(validation_alias="DEBUG", default=True)
    LOG_LEVEL: str = Field(validation_alias="LOG_LEVEL", default="INFO")

    desc: ServerDescriptionSettings = ServerDescriptionSettings()
    allocation: AllocationSettings = AllocationSettings()
    notifications: NotificationSettings = NotificationSettings()

    model_config = SettingsConfigDict(case_sensitive=True)
