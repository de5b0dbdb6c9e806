from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.service.ticket_purchase.domain.value_object.purchase_config import (
    CategoryPrices,
    PurchaseConfig,
)


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Cinema Tickets'
    VERSION: str = '0.1.0'
    DEBUG: bool = False

    # Purchase limits
    MAX_TICKETS: int = 25  # Per purchase, all categories combined

    # Unit prices per ticket category
    TICKET_PRICE_ADULT: int = 25
    TICKET_PRICE_CHILD: int = 15
    TICKET_PRICE_INFANT: int = 0

    # One infant per adult (infants sit on adult laps)
    ENFORCE_INFANT_ADULT_RATIO: bool = True

    @field_validator('MAX_TICKETS')
    @classmethod
    def validate_max_tickets(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('MAX_TICKETS must be a positive integer')
        return v

    @field_validator('TICKET_PRICE_ADULT', 'TICKET_PRICE_CHILD', 'TICKET_PRICE_INFANT')
    @classmethod
    def validate_ticket_price(cls, v: int) -> int:
        if v < 0:
            raise ValueError('Ticket prices must be non-negative')
        return v

    @model_validator(mode='after')
    def validate_adult_price(self) -> 'Settings':
        # Zero adult price means pricing was never configured
        if self.TICKET_PRICE_ADULT <= 0:
            raise ValueError('Adult ticket price must be greater than zero')
        return self

    def to_purchase_config(self) -> PurchaseConfig:
        return PurchaseConfig(
            max_tickets=self.MAX_TICKETS,
            category_prices=CategoryPrices(
                adult=self.TICKET_PRICE_ADULT,
                child=self.TICKET_PRICE_CHILD,
                infant=self.TICKET_PRICE_INFANT,
            ),
            enforce_infant_ratio=self.ENFORCE_INFANT_ADULT_RATIO,
        )

    def to_summary(self) -> dict[str, int | bool | str]:
        return {
            'PROJECT_NAME': self.PROJECT_NAME,
            'VERSION': self.VERSION,
            'DEBUG': self.DEBUG,
            'MAX_TICKETS': self.MAX_TICKETS,
            'TICKET_PRICE_ADULT': self.TICKET_PRICE_ADULT,
            'TICKET_PRICE_CHILD': self.TICKET_PRICE_CHILD,
            'TICKET_PRICE_INFANT': self.TICKET_PRICE_INFANT,
            'ENFORCE_INFANT_ADULT_RATIO': self.ENFORCE_INFANT_ADULT_RATIO,
        }


settings = Settings()  # type: ignore
