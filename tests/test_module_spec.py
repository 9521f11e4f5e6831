from pathlib import Path

import pytest

from jbossmodules.modules.attachmodules.domain import (
    ConfigurationError,
    ModuleSpec,
    ProjectMeta,
    ResolvedArtifact,
    ResolvedModuleSpec,
    resolve_effective_specs,
)


def build_project(tmp_path: Path) -> ProjectMeta:
    return ProjectMeta(
        group_id="org.ovirt.engine",
        artifact_id="common",
        base_dir=tmp_path,
        build_directory=tmp_path / "target",
        final_name="common-4.5.0",
    )


def test_empty_declaration_synthesises_project_module(tmp_path):
    specs = resolve_effective_specs(build_project(tmp_path), [])

    assert specs == [
        ResolvedModuleSpec(group_id="org.ovirt.engine", artifact_id="common", name="common", slot="main")
    ]


def test_none_declaration_behaves_like_empty(tmp_path):
    assert resolve_effective_specs(build_project(tmp_path), None) == resolve_effective_specs(
        build_project(tmp_path), []
    )


def test_implicit_module_uses_configured_name_and_slot(tmp_path):
    specs = resolve_effective_specs(
        build_project(tmp_path),
        [],
        default_name="org.ovirt.engine.common",
        default_module_slot="4.5",
    )

    assert specs[0].name == "org.ovirt.engine.common"
    assert specs[0].slot == "4.5"


def test_declared_specs_are_defaulted_without_mutation(tmp_path):
    declared = [ModuleSpec(artifact_id="postgresql"), ModuleSpec(group_id="org.slf4j", artifact_id="slf4j-api", slot="1.7")]

    specs = resolve_effective_specs(build_project(tmp_path), declared)

    assert declared[0] == ModuleSpec(artifact_id="postgresql")
    assert specs[0] == ResolvedModuleSpec("org.ovirt.engine", "postgresql", "postgresql", "main")
    assert specs[1] == ResolvedModuleSpec("org.slf4j", "slf4j-api", "slf4j-api", "1.7")


def test_configured_module_defaults_do_not_apply_to_declared_modules(tmp_path):
    specs = resolve_effective_specs(
        build_project(tmp_path),
        [ModuleSpec(artifact_id="utils")],
        default_name="ignored.name",
        default_module_slot="ignored",
    )

    assert specs[0].name == "utils"
    assert specs[0].slot == "main"


def test_dotted_name_becomes_module_path():
    spec = ResolvedModuleSpec(group_id="org.example", artifact_id="foo", name="org.example.foo", slot="main")
    root = Path("staging")

    assert spec.path_segments == ["org", "example", "foo", "main"]
    assert spec.slot_dir(root) == root / "org" / "example" / "foo" / "main"
    assert spec.resource_path(root, Path("/repo/foo-1.0.jar")) == root / "org" / "example" / "foo" / "main" / "foo-1.0.jar"


def test_matches_uses_group_and_artifact_id_only():
    spec = ResolvedModuleSpec(group_id="org.example", artifact_id="foo", name="foo")

    assert spec.matches(ResolvedArtifact("org.example", "foo", version="2.0", classifier="sources"))
    assert not spec.matches(ResolvedArtifact("org.other", "foo"))
    assert not spec.matches(ResolvedArtifact("org.example", "bar"))
    assert not spec.matches(None)


@pytest.mark.parametrize(
    "name, slot",
    [
        (".tmp.escape", "main"),
        ("org..example", "main"),
        ("org.example.", "main"),
        ("org/example", "main"),
        ("org\\example", "main"),
        ("org.example", ".."),
        ("org.example", "."),
        ("org.example", "../../etc"),
        ("org.example", "/tmp"),
        ("org.example", " "),
    ],
)
def test_unsafe_names_and_slots_are_rejected(tmp_path, name, slot):
    with pytest.raises(ConfigurationError, match="Invalid path segment"):
        resolve_effective_specs(build_project(tmp_path), [ModuleSpec(name=name, slot=slot)])


def test_slot_dir_stays_below_root(tmp_path):
    spec = ResolvedModuleSpec("org.example", "foo", ".tmp.escape")

    with pytest.raises(ConfigurationError):
        spec.slot_dir(tmp_path)
