"""Layering rules for the layered_users package."""

import pytest

from tests.architecture.rules import (
    Layer,
    LayeredArchitecture,
    build_graph,
    cyclic_slices,
    forbidden_imports,
    format_report,
    naming_violations,
    only_imported_from,
)

ROOT = "layered_users"
CONTROLLER = f"{ROOT}.controller"
SERVICE = f"{ROOT}.service"
REPOSITORY = f"{ROOT}.repository"
DOMAIN = f"{ROOT}.domain"
COMPOSITION_ROOT = f"{ROOT}.api"

ARCHITECTURE = LayeredArchitecture(
    layers=(
        Layer("Controller", CONTROLLER, suffix="Controller"),
        Layer("Service", SERVICE, suffix="Service"),
        Layer("Repository", REPOSITORY, suffix="Repository"),
        Layer("Domain", DOMAIN),
    ),
    may_be_accessed_by={
        "Controller": frozenset(),
        "Service": frozenset({"Controller"}),
        "Repository": frozenset({"Service"}),
        "Domain": frozenset({"Controller", "Service", "Repository"}),
    },
    composition_roots=(COMPOSITION_ROOT,),
)

LAYER_RULES = [
    "- Controllers may not be imported by any layer",
    "- Services may only be imported by Controllers",
    "- Repositories may only be imported by Services",
    "- Domain may be imported by Controllers, Services and Repositories",
    f"- Only {COMPOSITION_ROOT} may wire the layers together",
]


@pytest.fixture(scope="module")
def graph():
    return build_graph(ROOT)


def test_layer_dependencies(graph):
    """The layered architecture must be respected."""
    violations = ARCHITECTURE.access_violations(graph)

    if violations:
        pytest.fail(
            format_report("ARCHITECTURE VIOLATIONS DETECTED", violations, LAYER_RULES)
        )


def test_repositories_do_not_import_controllers(graph):
    """Repositories belong to the data layer and must not know the presentation layer."""
    violations = forbidden_imports(graph, source=REPOSITORY, target=CONTROLLER)

    assert not violations, format_report("Repository imports Controller", violations)


def test_services_do_not_import_controllers(graph):
    """Services belong to the business layer and must not know the presentation layer."""
    violations = forbidden_imports(graph, source=SERVICE, target=CONTROLLER)

    assert not violations, format_report("Service imports Controller", violations)


def test_repositories_only_imported_by_services(graph):
    """Only the service layer (and the wiring in the composition root) uses repositories."""
    violations = only_imported_from(graph, REPOSITORY, (SERVICE, COMPOSITION_ROOT))

    assert not violations, format_report("Repository imported outside services", violations)


@pytest.mark.parametrize("layer_name", ["Controller", "Service", "Repository"])
def test_naming_conventions(graph, layer_name):
    """Classes in a layer end with the layer's name."""
    layer = ARCHITECTURE.layer(layer_name)

    offenders = naming_violations(graph, layer.package, layer.suffix)

    assert not offenders, format_report(
        f"Classes in {layer.package} must end with '{layer.suffix}'", offenders
    )


def test_no_cyclic_dependencies(graph):
    """Top-level packages must not depend on each other in a cycle."""
    cycles = cyclic_slices(graph, ROOT)

    assert not cycles, format_report(
        "Cyclic dependencies", [f"{first} <-> {second}" for first, second in cycles]
    )


def test_outer_packages_reach_layers_only_through_composition_root(graph):
    """The CLI and runtime support never construct layer objects themselves."""
    violations = []
    for outer in (f"{ROOT}.cli", f"{ROOT}.runtime"):
        for layer in ARCHITECTURE.layers:
            violations.extend(forbidden_imports(graph, source=outer, target=layer.package))

    assert not violations, format_report("Layer imported outside the composition root", violations)


def test_every_layer_is_present(graph):
    """Guard against the rules passing vacuously after a package rename."""
    children = graph.find_children(ROOT)

    for layer in ARCHITECTURE.layers:
        assert layer.package in children
