import pytest

from jsonapi_serializer import JSONAPISerializer, MissingIdentifierError


@pytest.fixture
def serializer(registry):
    return JSONAPISerializer(registry)


def test_to_resource_orders_attributes_like_the_instance(serializer, registry):
    @registry.define("post", properties={"title": {}, "body": {}, "draft": {"public": True}})
    class Post:
        def __init__(self, **fields):
            self.__dict__.update(fields)

    resource = serializer.to_resource(Post(body="b", id="5", draft=False, title="t"))
    assert resource == {"type": "post", "id": "5", "attributes": {"body": "b", "draft": False, "title": "t"}}
    assert list(resource["attributes"]) == ["body", "draft", "title"]


def test_to_resource_skips_underscore_properties(serializer, models):
    instance = models["Single"](id="1", name="n")
    instance._cache = "hidden"
    assert serializer.get_fields(instance) == {"id": "1", "name": "n"}


def test_to_resource_requires_id_by_default(serializer, models):
    with pytest.raises(MissingIdentifierError):
        serializer.to_resource(models["Single"](name="n"))


def test_id_present_but_none_satisfies_requirement(serializer, models):
    resource = serializer.to_resource(models["Model"](id=None, name="n"))
    assert "id" not in resource
    assert resource["relationships"] == {"children": {}, "child": {}}


def test_relationship_object(serializer, models):
    instance = models["Model"](id="1", child=models["Single"](id="2"))
    assert serializer.relationship_object(instance, "child") == {
        "links": {"self": "/tests/1/relationships/child", "related": "/tests/1/child"},
        "data": {"id": "2", "type": "single"},
    }
    assert serializer.relationship_object(instance, "missing") is None


def test_relationships_without_id_only_carry_data(serializer, models):
    instance = models["Model"](children=[models["Child"](id="4"), "5"])
    relationships = serializer.get_relationships(instance)
    assert relationships == {
        "children": {"data": [{"id": "4", "type": "child"}, {"id": "5", "type": "child"}]},
        "child": {},
    }


def test_models_without_relationships_have_no_relationships_member(serializer, models):
    assert "relationships" not in serializer.to_resource(models["Toy"](id="1", label="x"))


def test_collect_included_is_depth_first(serializer, models):
    Child, Toy, Single = models["Child"], models["Toy"], models["Single"]
    instance = models["Model"](
        id="1",
        children=[Child(id="2", toys=[Toy(id="t1")]), Child(id="3")],
        child=Single(id="s"),
    )
    included = serializer.collect_included(instance)
    assert [(item["type"], item["id"]) for item in included] == [
        ("child", "2"),
        ("toy", "t1"),
        ("child", "3"),
        ("single", "s"),
    ]


def test_to_many_serializes_each_instance(serializer, models):
    Toy = models["Toy"]
    assert [item["id"] for item in serializer.to_many([Toy(id="1"), Toy(id="2")])] == ["1", "2"]


def test_related_instances_with_none_id_are_not_included(serializer, models):
    Model, Single = models["Model"], models["Single"]
    parents = [Model(id="1", child=Single(id=None, name="a")), Model(id="2", child=Single(id=None, name="b"))]
    assert [serializer.collect_included(parent) for parent in parents] == [[], []]
