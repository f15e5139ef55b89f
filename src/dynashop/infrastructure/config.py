"""Configuration settings for the application."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from ``DYNASHOP_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DYNASHOP_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    # Store connection. Leave endpoint_url empty to talk to AWS itself;
    # point it at DynamoDB Local for development.
    endpoint_url: str | None = None
    region: str = "us-east-1"
    access_key_id: str | None = None
    secret_access_key: str | None = None

    customer_table: str = "customers"
    order_table: str = "orders"
    product_table: str = "products"
    category_index: str = "category-index"

    # Seconds
    connect_timeout: float = Field(default=2.0, gt=0)
    read_timeout: float = Field(default=5.0, gt=0)
    # Total SDK attempts for throttled / transient store calls
    max_store_attempts: int = Field(default=3, ge=1)
    # Compare-and-swap attempts before a stock adjustment reports a conflict
    stock_max_attempts: int = Field(default=5, ge=1)
    # Seconds; upper bound of the randomised pause after the first lost race
    stock_retry_base_delay: float = Field(default=0.01, ge=0)

    log_level: str = "INFO"
    log_json: bool = False

    def table_config(self) -> TableConfig:
        return TableConfig(
            customers=self.customer_table,
            orders=self.order_table,
            products=self.product_table,
            category_index=self.category_index,
        )


@dataclass(frozen=True)
class TableConfig:
    """Physical table and index names, fixed at startup."""

    customers: str = "customers"
    orders: str = "orders"
    products: str = "products"
    category_index: str = "category-index"

    @property
    def all_tables(self) -> tuple[str, ...]:
        return (self.customers, self.orders, self.products)
