from qcc.suggestions import Role, Suggestion, SuggestionsList

FRUIT = ["apple", "pineapple", "grape", "apricot"]


def test_role_values():
    names = SuggestionsList().role_names()
    assert sorted(int(role) for role in names) == [257, 258, 259]
    assert [Role.SUGGESTION, Role.MODEL_DATA, Role.INDEX] == [257, 258, 259]


def test_role_names():
    names = SuggestionsList().role_names()
    assert names[Role.SUGGESTION] == "suggestion"
    assert names[Role.INDEX] == "suggestionIndex"
    assert names[Role.MODEL_DATA] == "suggestionModelData"


def test_matches_in_model_order():
    s = SuggestionsList(FRUIT)
    s.text = "app"
    assert [x.model_data for x in s] == ["apple", "pineapple"]
    assert [x.index for x in s] == [0, 1]


def test_match_is_marked_bold():
    s = SuggestionsList(FRUIT, text="app")
    assert s.suggestions[0] == Suggestion("apple", "<b>app</b>le", 0)


def test_marking_only_adds_tags():
    s = SuggestionsList(FRUIT, text="ap")
    assert len(s) > 0
    for item in s:
        assert item.suggestion.replace("<b>", "").replace("</b>", "") == item.model_data


def test_full_match_is_excluded():
    s = SuggestionsList(FRUIT, text="grape")
    assert [x.model_data for x in s] == []


def test_case_insensitive_by_default():
    s = SuggestionsList(FRUIT, text="APP")
    assert [x.model_data for x in s] == ["apple", "pineapple"]
    s.case_sensitive = True
    assert len(s) == 0


def test_maximum_number_limits_results():
    s = SuggestionsList(FRUIT, text="p")
    assert len(s) == 4
    s.maximum_number_of_suggestions = 2
    assert [x.model_data for x in s] == ["apple", "pineapple"]


def test_non_positive_maximum_is_ignored():
    s = SuggestionsList(FRUIT, text="p")
    s.maximum_number_of_suggestions = 0
    assert s.maximum_number_of_suggestions == 100
    assert len(s) == 4


def test_empty_text_gives_no_suggestions():
    s = SuggestionsList(FRUIT, text="")
    assert len(s) == 0


def test_model_duplicates_removed():
    s = SuggestionsList()
    s.model = ["b", "a", "b"]
    assert s.model == ["b", "a"]


def test_data_by_role():
    s = SuggestionsList(FRUIT, text="app")
    assert s.data(1, Role.MODEL_DATA) == "pineapple"
    assert s.data(1, Role.INDEX) == 1
    assert s.data(1, Role.SUGGESTION) == s.suggestions[1].suggestion
    assert s.data(5, Role.MODEL_DATA) is None
    assert s.data(0, 0) is None


def test_clear():
    s = SuggestionsList(FRUIT, text="app")
    s.clear()
    assert s.text == ""
    assert s.model == []
    assert len(s) == 0