from sentence_focus.config.schema import deep_merge_dicts


def test_deep_merge_nested_and_list_replace() -> None:
    base = {
        "sentence": {"sentence_delimiters": ".!?", "titles": ["Mr.", "Ms."]},
        "highlight": {"reset_on_scroll": True},
    }
    override = {
        "sentence": {"titles": ["Dr."]},
    }
    merged = deep_merge_dicts(base, override)
    assert merged == {
        "sentence": {"sentence_delimiters": ".!?", "titles": ["Dr."]},
        "highlight": {"reset_on_scroll": True},
    }
    # ensure original not mutated
    assert base["sentence"]["titles"] == ["Mr.", "Ms."]
