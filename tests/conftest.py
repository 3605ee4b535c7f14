"""
Shared pattern catalogs for AssetScan tests
"""
import pytest

from assetscan.services.catalog_loader import parse_asset_catalog, parse_equipment_catalog


ASSET_CATALOG = [
    {
        "systemType": "Fire Alarm",
        "assetType": "Smoke Detector",
        "patterns": [
            {"text": "smoke detector", "weight": 10},
            {"text": "fire alarm", "weight": 5}
        ],
        "requireMatchCount": 1
    },
    {
        "systemType": "HVAC",
        "assetType": "Air Handling Unit",
        "patterns": [
            {"text": "air handling unit", "weight": 10},
            {"text": "ahu", "weight": 5},
            {"text": "fan", "weight": 3}
        ],
        "requireMatchCount": 2
    },
    {
        "systemType": "Plumbing",
        "assetType": "Water Heater",
        "patterns": [
            {"text": "water heater", "weight": 10},
            {"text": "boiler", "weight": 5}
        ],
        "requireMatchCount": 1
    }
]


EQUIPMENT_CATALOG = [
    {
        "systemType": "Fire Alarm",
        "assetType": "Smoke Detector",
        "patterns": [
            {
                "equipmentId": "EQ-APOLLO-55000",
                "pattern": [
                    {"text": "apollo", "weight": 6},
                    {"text": "55000", "weight": 6},
                    {"text": "optical", "weight": 8}
                ],
                "requireMatchCount": 1,
                "equipmentDetails": {
                    "manufacturer": "Apollo",
                    "model": "55000-600",
                    "equipmentDetails": {
                        "productType": "Optical smoke detector",
                        "features": ["Low profile", "Twin LED"],
                        "technicalSpecs": {
                            "voltage": "17-28V DC",
                            "current": {"quiescent": "45uA"}
                        },
                        "application": "Commercial buildings"
                    }
                }
            },
            {
                "equipmentId": "EQ-SYSTEM-SENSOR-2151",
                "pattern": [
                    {"text": "system sensor", "weight": 6},
                    {"text": "2151", "weight": 4}
                ],
                "requireMatchCount": 1,
                "equipmentDetails": {
                    "manufacturer": "System Sensor",
                    "model": "2151",
                    "equipmentDetails": {
                        "productType": "Photoelectric smoke detector",
                        "features": ["Plug-in"],
                        "technicalSpecs": {"voltage": "15-32V DC"},
                        "application": "Offices"
                    }
                }
            }
        ]
    },
    {
        "systemType": "Security",
        "assetType": "Smoke Detector",
        "patterns": [
            {
                "equipmentId": "EQ-DECOY-SECURITY",
                "pattern": [{"text": "apollo", "weight": 50}],
                "requireMatchCount": 1,
                "equipmentDetails": {"manufacturer": "Decoy", "model": "D1"}
            }
        ]
    },
    {
        "systemType": "HVAC",
        "assetType": "Air Handling Unit",
        "patterns": [
            {
                "equipmentId": "EQ-CARRIER-39M",
                "pattern": [
                    {"text": "carrier", "weight": 10},
                    {"text": "apollo", "weight": 100}
                ],
                "requireMatchCount": 1,
                "equipmentDetails": {
                    "manufacturer": "Carrier",
                    "model": "39M",
                    "equipmentDetails": {
                        "productType": "Air handler",
                        "features": [],
                        "technicalSpecs": {"airflow": "10000 cfm"},
                        "application": "Central plant"
                    }
                }
            }
        ]
    }
]


@pytest.fixture
def asset_rules():
    """Validated asset classification catalog"""
    return parse_asset_catalog(ASSET_CATALOG)


@pytest.fixture
def equipment_catalog():
    """Validated equipment catalog"""
    return parse_equipment_catalog(EQUIPMENT_CATALOG)
