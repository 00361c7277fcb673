from __future__ import annotations


def test_top_level_exports() -> None:
    import deedbook

    assert deedbook.run is not None
    assert deedbook.DeedbookServer is not None
    assert deedbook.DeedbookClient is not None
    assert deedbook.PropertyRegistry is not None
    assert deedbook.PropertyHandle is not None
    assert deedbook.ZERO_ADDRESS == "0x" + "0" * 40
    assert issubclass(deedbook.DeletedProperty, deedbook.InvalidId)
    assert issubclass(deedbook.NotOwner, deedbook.RegistryError)


def test_package_paths_work() -> None:
    from deedbook.api import create_api_app
    from deedbook.api.routes import mount_properties_api
    from deedbook.core import Listing, PropertyRegistry, event_to_dict, listing_to_dict
    from deedbook.runtime import Settings, configure_logging, create_app, run
    from deedbook.sdk import DeedbookClient, PropertyHandle

    assert create_api_app is not None
    assert mount_properties_api is not None
    assert Listing is not None
    assert PropertyRegistry is not None
    assert event_to_dict is not None
    assert listing_to_dict is not None
    assert Settings is not None
    assert configure_logging is not None
    assert create_app is not None
    assert run is not None
    assert DeedbookClient is not None
    assert PropertyHandle is not None


def test_cli_entry_point_is_importable() -> None:
    import deedbook.__main__ as cli

    assert callable(cli.main)
