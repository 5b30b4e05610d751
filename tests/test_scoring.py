import pytest

from scoring import dominant_traits, engagement_band, mean_engagement, top_trait
from survey_state import ResponseStore


def test_empty_store_aggregates():
    store = ResponseStore()
    assert mean_engagement(store) == 0
    assert dominant_traits(store) == []
    assert top_trait(store) is None


def test_mean_tracks_current_values():
    store = ResponseStore()
    store.record_engagement("e1", 5)
    store.record_engagement("e2", 2)
    assert mean_engagement(store) == pytest.approx(3.5)

    # overwrite replaces, never appends
    store.record_engagement("e2", 4)
    assert mean_engagement(store) == pytest.approx(4.5)
    store.record_engagement("e3", 3)
    assert mean_engagement(store) == pytest.approx(4.0)


def test_dominant_traits_sorted_by_count():
    store = ResponseStore()
    for qid, trait in [("b1", "Guardian"), ("b2", "Informer"), ("b3", "Informer"), ("b4", "Informer"), ("b5", "Guardian")]:
        store.record_behavioral(qid, trait)
    assert dominant_traits(store) == [("Informer", 3), ("Guardian", 2)]


def test_ties_keep_first_insertion_order():
    store = ResponseStore()
    for qid, trait in [("b1", "Executor"), ("b2", "Harmonizer"), ("b3", "Innovation"), ("b4", "Executor"), ("b5", "Harmonizer")]:
        store.record_behavioral(qid, trait)
    assert dominant_traits(store) == [("Executor", 2), ("Harmonizer", 2), ("Innovation", 1)]
    assert top_trait(store) == "Executor"


def test_free_form_trait_labels_are_counted():
    store = ResponseStore()
    store.record_behavioral("b1", "Mentor")
    store.record_behavioral("b2", "Mentor")
    store.record_behavioral("b3", "Executor")
    assert top_trait(store) == "Mentor"


def test_aggregates_do_not_mutate_store():
    store = ResponseStore()
    store.record_engagement("e1", 3)
    store.record_behavioral("b1", "Executor")
    mean_engagement(store)
    dominant_traits(store)
    assert store.engagement_responses == {"e1": 3}
    assert store.behavioral_responses == {"b1": "Executor"}


@pytest.mark.parametrize("avg,band", [(5.0, "high"), (4.0, "high"), (3.99, "moderate"), (3.0, "moderate"), (2.9, "low"), (0, "low")])
def test_engagement_band(avg, band):
    assert engagement_band(avg) == band


def test_likert_out_of_range():
    with pytest.raises(ValueError):
        ResponseStore().record_engagement("e1", 0)
