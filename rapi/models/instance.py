from .base import Model

__all__ = (
    "CaptchaFeature",
    "ServiceFeature",
    "VoiceFeature",
    "InstanceFeatures",
    "BuildInformation",
    "ServerConfiguration",
)


class CaptchaFeature(Model):
    enabled: bool
    key: str


class ServiceFeature(Model):
    """Configuration of an auxiliary service (`autumn` is the CDN,
    `january` the link proxy)
    """

    enabled: bool
    url: str


class VoiceFeature(Model):
    enabled: bool
    url: str
    ws: str


class InstanceFeatures(Model):
    captcha: CaptchaFeature
    email: bool
    invite_only: bool
    autumn: ServiceFeature
    january: ServiceFeature
    voso: VoiceFeature


class BuildInformation(Model):
    commit_sha: str
    commit_timestamp: str
    semver: str
    origin_url: str
    timestamp: str


class ServerConfiguration(Model):
    """The document served at the root of the REST API"""

    revolt: str
    features: InstanceFeatures
    ws: str
    app: str
    vapid: str
    build: BuildInformation
