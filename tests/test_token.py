"""Tests for the example token encoder."""

from __future__ import annotations

import base64
import json

import pytest

from basexx import Base64Url, FormatError
from examples.implementation.encoding import TokenEncoder

# Compressed access token body produced by another better-auth implementation.
TOKEN_BODY = "H4sIAAAAAAACA22PXY-iMBSG_wvX203rUBHuOgIDasQ1jC5uNobaKkU-TFtAZ-J_nzoXu8nOnsuT93k_3i3FZc9lzHijhb5ZnoUIiUl_mNkp0isAWHpgCzKMWSaghJvE309VxifT6_no3Nh1G1jfLMZ7ceCGDYJhvIoDqXySVCAcPdfc2VFYlHG-TabDa0leu1NE56Byc8OJv6lB0taqqFx5jGadHfUiTU9OHYrFXp17FmKIdpfMZk80ileGvHS0Eoc5_1P4jVIM1qW92Qb-7keC6-HlxZH-Yjm-Coxilm1Q2-AV3dPO4LLVuRZtE-WqeISHIZDEGWe125Z-BnVHxc9NuQZk3c-XziyS5-2ybt6OpyJ51Faq44xoQ47gCAMEAZykaORh17PR9wnG8PN2RsuvFyFv_yifPGR_UUp-lFwVwRfATSH8n3WutRS001xZ3rt14bI2xcwo9XxbtxV_PHNWi8byfhnznBlkkEJz6_f9fv8A44o2TvkBAAA"


def test_token_round_trip() -> None:
    """Test that tokens survive encoding and decoding."""
    token_encoder = TokenEncoder()
    payload = '{"identity": "EOomshl9rfHJu4HviTTg7mFiL_skvdF501ZpY4d3bHIP"}'

    token = token_encoder.encode(payload)

    assert "=" not in token
    assert token_encoder.decode(token) == payload


def test_token_body_matches_standard_decoder() -> None:
    """Test decoding a foreign token body against the standard library."""
    expected = base64.urlsafe_b64decode(TOKEN_BODY + "=" * (-len(TOKEN_BODY) % 4))

    assert Base64Url.decode(TOKEN_BODY) == expected


def test_token_body_decodes() -> None:
    token = json.loads(TokenEncoder().decode(TOKEN_BODY))

    assert token["identity"] == "EOomshl9rfHJu4HviTTg7mFiL_skvdF501ZpY4d3bHIP"
    assert token["attributes"] == {"permissionsByRole": {"admin": ["read", "write"]}}


def test_token_decode_rejects_non_base64url() -> None:
    with pytest.raises(FormatError):
        TokenEncoder().decode("not a token!")
