from wanikani_sentences.file_rules import (
    build_combined_filename,
    build_level_filename,
    level_slug,
    validate_batch,
    validate_filename,
)


def test_level_filenames():
    assert level_slug("Level 5") == "level_5"
    assert build_level_filename("Level 12", "english") == "wanikani_level_12_english.txt"
    assert build_combined_filename("sentences") == "wanikani_all_levels_sentences.txt"


def test_validate_filename():
    assert validate_filename("wanikani_level_3_japanese.txt")
    assert validate_filename("wanikani_sentences.json")
    assert validate_filename("wanikani_all_levels_english.txt")
    assert not validate_filename("wanikani_level_x_japanese.txt")
    assert not validate_filename("notes.txt")


def test_validate_batch_rejects_duplicates():
    assert validate_batch(["wanikani_level_1_english.txt", "wanikani_level_2_english.txt"])
    assert not validate_batch(["wanikani_level_1_english.txt", "wanikani_level_1_english.txt"])
