import pytest

from launderette.db.store import DocumentNotFound


def test_add_and_get(store):
    ref = store.collection("things").add({"name": "a", "n": 1})
    snap = ref.get()
    assert snap.exists
    assert snap.data == {"name": "a", "n": 1}
    assert snap.to_dict() == {"id": ref.id, "name": "a", "n": 1}


def test_missing_document(store):
    snap = store.collection("things").doc("nope").get()
    assert not snap.exists
    assert snap.data == {}


def test_collections_are_separate(store):
    store.collection("a").doc("same").set({"v": 1})
    store.collection("b").doc("same").set({"v": 2})
    assert store.collection("a").doc("same").get().data == {"v": 1}
    assert len(store.collection("b").get()) == 1


def test_set_replaces_and_update_merges(store):
    ref = store.collection("things").doc("x")
    ref.set({"a": 1, "b": 2})
    ref.set({"a": 10})
    assert ref.get().data == {"a": 10}
    ref.update({"b": 3})
    assert ref.get().data == {"a": 10, "b": 3}


def test_update_missing_document_raises(store):
    with pytest.raises(DocumentNotFound):
        store.collection("things").doc("ghost").update({"a": 1})


def test_delete_is_idempotent(store):
    ref = store.collection("things").add({"a": 1})
    ref.delete()
    ref.delete()
    assert not ref.get().exists


def test_where_operators(store):
    things = store.collection("things")
    things.doc("1").set({"n": 1, "tags": ["x"], "kind": "odd"})
    things.doc("2").set({"n": 2, "tags": ["x", "y"], "kind": "even"})
    things.doc("3").set({"n": 3, "kind": "odd"})

    def found(query):
        return sorted(s.id for s in query.get())

    assert found(things.where("kind", "==", "odd")) == ["1", "3"]
    assert found(things.where("kind", "!=", "odd")) == ["2"]
    assert found(things.where("n", ">", 1)) == ["2", "3"]
    assert found(things.where("n", "<=", 2)) == ["1", "2"]
    assert found(things.where("n", "in", [1, 3])) == ["1", "3"]
    assert found(things.where("tags", "array-contains", "y")) == ["2"]
    assert found(things.where("kind", "==", "odd").where("n", ">=", 2)) == ["3"]


def test_documents_without_the_field_never_match(store):
    things = store.collection("things")
    things.doc("1").set({"n": 1})
    things.doc("2").set({"other": True})
    assert [s.id for s in things.where("n", "!=", 5).get()] == ["1"]


def test_incomparable_values_do_not_match(store):
    things = store.collection("things")
    things.doc("1").set({"n": "text"})
    assert things.where("n", ">", 3).get() == []


def test_unknown_operator_rejected(store):
    with pytest.raises(ValueError):
        store.collection("things").where("n", "~", 1)


def test_order_by_and_limit(store):
    things = store.collection("things")
    for doc_id, n in [("a", 2), ("b", 3), ("c", 1)]:
        things.doc(doc_id).set({"n": n})
    things.doc("d").set({})

    assert [s.id for s in things.order_by("n").get()] == ["c", "a", "b", "d"]
    assert [s.id for s in things.order_by("n", "desc").get()] == ["b", "a", "c", "d"]
    assert [s.id for s in things.order_by("n", "desc").limit(2).get()] == ["b", "a"]


def test_secondary_ordering(store):
    things = store.collection("things")
    things.doc("1").set({"g": "b", "n": 1})
    things.doc("2").set({"g": "a", "n": 2})
    things.doc("3").set({"g": "a", "n": 1})
    ordered = things.order_by("g").order_by("n", "desc").get()
    assert [s.id for s in ordered] == ["2", "3", "1"]


def test_queries_are_immutable(store):
    things = store.collection("things")
    things.doc("1").set({"n": 1})
    narrowed = things.where("n", "==", 2)
    assert narrowed.get() == []
    assert len(things.get()) == 1


def test_nested_field_paths(store):
    things = store.collection("things")
    things.doc("1").set({"address": {"city": "Leeds"}})
    things.doc("2").set({"address": {"city": "York"}})
    assert [s.id for s in things.where("address.city", "==", "York").get()] == ["2"]
