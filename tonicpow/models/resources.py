"""Pydantic models for TonicPow resources.

Every field is optional; unset fields are dropped when a model is sent as a
request payload.

For more information: https://docs.tonicpow.com
"""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """User model."""

    balance: int | None = None
    earned: int | None = None
    email: str | None = None
    email_verified: bool | None = None
    first_name: str | None = None
    id: int | None = None
    internal_address: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    new_password: str | None = None
    new_password_confirm: str | None = None
    password: str | None = None
    payout_address: str | None = None
    phone: str | None = None
    phone_verified: bool | None = None
    referred_by_user_id: int | None = None
    status: str | None = None


class AdvertiserProfile(BaseModel):
    """Advertiser profile model (child of User)."""

    homepage_url: str | None = None
    icon_url: str | None = None
    id: int | None = None
    name: str | None = None
    user_id: int | None = None


class Goal(BaseModel):
    """Goal model (child of Campaign)."""

    campaign_id: int | None = None
    description: str | None = None
    id: int | None = None
    max_per_promoter: int | None = None
    max_per_visitor: int | None = None
    name: str | None = None
    payout_rate: float | None = None
    payouts: int | None = None
    payout_type: str | None = None
    title: str | None = None


class Campaign(BaseModel):
    """Campaign model (child of AdvertiserProfile)."""

    advertiser_profile: AdvertiserProfile | None = None
    advertiser_profile_id: int | None = None
    balance: float | None = None
    balance_satoshis: int | None = None
    bot_protection: bool | None = None
    clicks: int | None = None
    currency: str | None = None
    description: str | None = None
    expires_at: str | None = None  # RFC 3339
    funding_address: str | None = None
    goals: list[Goal] | None = None
    id: int | None = None
    image_url: str | None = None
    links_created: int | None = None
    pay_per_click_rate: float | None = None
    public_guid: str | None = None
    target_url: str | None = None
    title: str | None = None


class Conversion(BaseModel):
    """Conversion model.

    The API sends the identifier under the upper-case "ID" key.
    """

    model_config = ConfigDict(populate_by_name=True)

    amount: int | None = None
    custom_dimensions: str | None = None
    goal_id: int | None = None
    goal_name: str | None = None
    id: int | None = Field(default=None, alias="ID")
    payout_after: str | None = None
    status: str | None = None
    tx_id: str | None = None
    user_id: int | None = None


class Link(BaseModel):
    """Link model (relates a Campaign to a User).

    Set custom_short_code on create to use your own short code.
    """

    campaign_id: int | None = None
    custom_short_code: str | None = None
    id: int | None = None
    short_code: str | None = None
    short_code_url: str | None = None
    user_id: int | None = None


class VisitorSession(BaseModel):
    """Session for any visitor or user (related to a link and campaign)."""

    campaign_id: int | None = None
    custom_dimensions: str | None = None
    ip_address: str | None = None
    link_id: int | None = None
    link_user_id: int | None = None
    provider: str | None = None
    referer: str | None = None
    tncpw_session: str | None = None
    user_agent: str | None = None


class Rate(BaseModel):
    """Currency rate result."""

    currency: str | None = None
    currency_amount: float | None = None
    currency_last_updated: str | None = None
    currency_name: str | None = None
    price: float | None = None
    price_in_satoshis: int | None = None
    rate_last_updated: str | None = None
