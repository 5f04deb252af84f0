import dataclasses

import pytest

from account_service.app.services.reference_data import ReferenceData, load_reference_data
from account_service.domain.entities import Language, Timezone


def test_defaults():
    data = ReferenceData.defaults()

    assert data.language_codes == ("en", "ja")
    assert data.is_available_language("ja")
    assert not data.is_available_language("xx")
    assert data.is_available_timezone("Asia/Tokyo")
    assert not data.is_available_timezone("Mars/Olympus")
    offsets = [t.utc_offset for t in data.timezones]
    assert offsets == sorted(offsets)


def test_is_immutable():
    data = ReferenceData.defaults()
    with pytest.raises(dataclasses.FrozenInstanceError):
        data.default_language = "ja"


def test_to_iso639():
    assert ReferenceData.to_iso639("en_US") == "en"
    assert ReferenceData.to_iso639("ja") == "ja"


@pytest.mark.asyncio
async def test_load_seeds_empty_tables(mock_uow):
    seeded_languages = [Language(code="en", name="English")]
    seeded_timezones = [Timezone(code="UTC", name="UTC", utc_offset=0, daylight_saving=0)]
    mock_uow.languages.list_all.side_effect = [[], seeded_languages]
    mock_uow.timezones.list_all.side_effect = [[], seeded_timezones]

    data = await load_reference_data(mock_uow, "en")

    assert mock_uow.languages.create.call_count == 2
    assert mock_uow.timezones.create.call_count == 6
    mock_uow.commit.assert_called_once()
    assert data.language_codes == ("en",)
    assert data.is_available_timezone("UTC")


@pytest.mark.asyncio
async def test_load_existing_tables(mock_uow):
    mock_uow.languages.list_all.return_value = [Language(code="ja", name="Japanese")]
    mock_uow.timezones.list_all.return_value = [
        Timezone(code="Asia/Tokyo", name="Tokyo", utc_offset=540, daylight_saving=0)
    ]

    data = await load_reference_data(mock_uow, "ja")

    mock_uow.languages.create.assert_not_called()
    mock_uow.commit.assert_not_called()
    assert data.default_language == "ja"
    assert data.timezones[0].utc_offset == 540
