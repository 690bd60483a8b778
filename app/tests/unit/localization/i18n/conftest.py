"""Feature-level fixtures for i18n tests."""

from unittest.mock import MagicMock

import pytest
import yaml


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Directory with YAML bundles for fr-FR and ar-MA.

    - nav.fr-FR.yml
    - product.fr-FR.yml
    - nav.ar-MA.yml
    """
    with open(tmp_path / "nav.fr-FR.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump({"nav": {"home": "Accueil", "cart": "Panier"}}, f, allow_unicode=True)

    product = {
        "product": {
            "add_to_cart": {"value": "Ajouter au panier", "context": "button"},
            "price": {"value": "Prix: {amount}", "variables": {"amount": "0"}},
            "retired": {"value": "Ancien", "is_active": False},
        }
    }
    with open(tmp_path / "product.fr-FR.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump(product, f, allow_unicode=True)

    with open(tmp_path / "nav.ar-MA.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump({"nav": {"home": "الرئيسية"}}, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def dynamodb_client():
    """boto3 DynamoDB client mock with a single-page paginator."""
    client = MagicMock()
    client.can_paginate.return_value = True
    paginator = MagicMock()
    paginator.paginate.return_value = [{"Items": []}]
    client.get_paginator.return_value = paginator
    return client
