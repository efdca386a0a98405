import pytest

from s3_event_pipeline.component import plan_component
from s3_event_pipeline.errors import (
    DependencyCycleError,
    DuplicateDeclarationError,
    UnknownDependencyError,
)
from s3_event_pipeline.graph import DeclarationGraph


class TestComponentPlan:
    def test_declares_seven_children(self):
        graph = plan_component("alpha")

        assert graph.owner == "alpha"
        assert len(graph) == 7

    def test_realization_order(self):
        order = [d.name for d in plan_component("alpha").realization_order()]

        assert order == [
            "S3Bucket",
            "LambdaIamRole",
            "LambdaIamPolicy",
            "LambdaFunction",
            "LambdaFunctionResourcePolicy",
            "S3BucketNotification",
            "S3BucketObject",
        ]

    def test_notification_waits_for_invoke_permission(self):
        graph = plan_component("alpha")

        assert graph.explicit_dependencies_of("S3BucketNotification") == (
            "LambdaFunctionResourcePolicy",
        )

    def test_seed_object_waits_for_notification(self):
        graph = plan_component("alpha")

        assert graph.explicit_dependencies_of("S3BucketObject") == (
            "S3BucketNotification",
        )

    def test_only_two_explicit_edges(self):
        graph = plan_component("alpha")

        explicit = {d.name: d.depends_on for d in graph if d.depends_on}
        assert set(explicit) == {"S3BucketNotification", "S3BucketObject"}

    def test_teardown_removes_seed_object_first(self):
        order = [d.name for d in plan_component("alpha").teardown_order()]

        assert order[0] == "S3BucketObject"
        assert order.index("S3BucketNotification") < order.index(
            "LambdaFunctionResourcePolicy"
        )
        assert order.index("LambdaFunction") < order.index("LambdaIamRole")
        assert order[-1] == "S3Bucket"


class TestDeclarationGraph:
    def test_order_follows_edges_not_insertion(self):
        graph = DeclarationGraph("owner")
        graph.add("upload", "aws:s3/bucketObject:BucketObject", depends_on=["wiring"])
        graph.add("wiring", "aws:s3/bucketNotification:BucketNotification")

        order = [d.name for d in graph.realization_order()]
        assert order == ["wiring", "upload"]

    def test_dependencies_merge_edge_kinds(self):
        graph = DeclarationGraph("owner")
        graph.add("a", "t")
        graph.add("b", "t")
        graph.add("c", "t", references=["a"], depends_on=["a", "b"])

        assert graph.dependencies_of("c") == ("a", "b")
        assert graph.explicit_dependencies_of("c") == ("a", "b")

    def test_duplicate_name(self):
        graph = DeclarationGraph("owner")
        graph.add("a", "t")

        with pytest.raises(DuplicateDeclarationError):
            graph.add("a", "t")

    def test_unknown_dependency(self):
        graph = DeclarationGraph("owner")
        graph.add("a", "t", depends_on=["missing"])

        with pytest.raises(UnknownDependencyError, match="missing"):
            graph.realization_order()

    def test_cycle(self):
        graph = DeclarationGraph("owner")
        graph.add("a", "t", references=["b"])
        graph.add("b", "t", depends_on=["a"])
        graph.add("c", "t")

        with pytest.raises(DependencyCycleError) as exc_info:
            graph.realization_order()
        assert "a, b" in str(exc_info.value)

    def test_container_protocol(self):
        graph = DeclarationGraph("owner")
        declaration = graph.add("a", "t")

        assert "a" in graph
        assert "b" not in graph
        assert graph["a"] is declaration
        assert list(graph) == [declaration]
        assert graph.names == ["a"]
