import pytest

from authenticator import InvalidParameter, InvalidSecret, ProvisioningParameters, build_uri, parse_uri
from authenticator.utils import strings_equal

SECRET = "JBSWY3DPEHPK3PXP"


def test_default_uri_is_minimal():
    uri = build_uri(SECRET, "ACME:alice@example.com", "ACME")
    assert uri == "otpauth://totp/ACME:alice@example.com?secret=JBSWY3DPEHPK3PXP&issuer=ACME"


def test_non_default_digits_and_period():
    uri = build_uri(SECRET, "alice", "ACME", digits=8, period=60)
    assert uri == "otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP&issuer=ACME&digits=8&period=60"


def test_only_digits_set():
    uri = build_uri(SECRET, "alice", "ACME", digits=8)
    assert uri.endswith("&issuer=ACME&digits=8")
    assert "period=" not in uri


def test_only_period_set():
    uri = build_uri(SECRET, "alice", "ACME", period=15)
    assert uri.endswith("&issuer=ACME&period=15")
    assert "digits=" not in uri


def test_issuer_is_percent_encoded():
    uri = build_uri(SECRET, "alice", "Acme Co & Sons")
    assert uri == "otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP&issuer=Acme%20Co%20%26%20Sons"


def test_label_passes_through():
    assert build_uri(SECRET, "My Co:bob", "x").startswith("otpauth://totp/My Co:bob?")


@pytest.mark.parametrize("secret", ["", "jbswy3dpehpk3pxp", "JBSWY3DPEHPK3PX1"])
def test_invalid_secret(secret):
    with pytest.raises(InvalidSecret):
        build_uri(secret, "alice", "ACME")


@pytest.mark.parametrize("kwargs", [{"digits": 7}, {"period": 14}, {"period": 61}])
def test_invalid_parameters(kwargs):
    with pytest.raises(InvalidParameter):
        build_uri(SECRET, "alice", "ACME", **kwargs)


def test_provisioning_parameters():
    params = ProvisioningParameters(SECRET, "ACME:alice", "ACME", digits=8)
    assert params.to_uri() == build_uri(SECRET, "ACME:alice", "ACME", digits=8)


def test_parse_uri_round_trip():
    params = ProvisioningParameters(SECRET, "ACME:alice@example.com", "Acme Co", digits=8, period=45)
    assert parse_uri(params.to_uri()) == params


@pytest.mark.parametrize("label", ["ACME:100%41", "ACME%3Aalice", "a%20b", "Acme Co:bob"])
def test_parse_uri_round_trip_keeps_label(label):
    params = ProvisioningParameters(SECRET, label, "ACME")
    assert parse_uri(params.to_uri()) == params


def test_parse_uri_defaults():
    params = parse_uri("otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP&issuer=ACME")
    assert params == ProvisioningParameters(SECRET, "alice", "ACME", 6, 30)


def test_parse_uri_label_is_not_decoded():
    params = parse_uri("otpauth://totp/ACME%3Aalice%40example.com?secret=JBSWY3DPEHPK3PXP&issuer=ACME")
    assert params.label == "ACME%3Aalice%40example.com"


@pytest.mark.parametrize(
    "uri",
    [
        "https://totp/alice?secret=JBSWY3DPEHPK3PXP",
        "otpauth://hotp/alice?secret=JBSWY3DPEHPK3PXP&counter=0",
        "otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP&digits=7",
        "otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP&period=90",
        "otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP&digits=six",
    ],
)
def test_parse_uri_invalid_parameter(uri):
    with pytest.raises(InvalidParameter):
        parse_uri(uri)


@pytest.mark.parametrize("uri", ["otpauth://totp/alice?issuer=ACME", "otpauth://totp/alice?secret=jbswy3dp"])
def test_parse_uri_invalid_secret(uri):
    with pytest.raises(InvalidSecret):
        parse_uri(uri)


def test_strings_equal():
    assert strings_equal("482193", "482193")
    assert not strings_equal("482193", "482194")
    assert not strings_equal("482193", "48219")
    # fullwidth digits normalise to ASCII
    assert strings_equal("４８２１９３", "482193")


def test_strings_equal_lone_surrogates():
    assert not strings_equal("\udc80\udc80", "482193")
    assert strings_equal("\udc80", "\udc80")
