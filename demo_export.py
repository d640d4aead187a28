#!/usr/bin/env python3
"""
Demo: Export the sample value catalog as YAML.
"""

from dtdemo.values import build_catalog
from dtdemo.serialization import catalog_to_yaml


def main():
    catalog = build_catalog()

    print("=" * 70)
    print("SAMPLE CATALOG (YAML)")
    print("=" * 70)
    print(catalog_to_yaml(catalog))


if __name__ == "__main__":
    main()
