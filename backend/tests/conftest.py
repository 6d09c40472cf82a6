"""Shared pytest fixtures for all tests."""

from pathlib import Path

import pytest

from testgen.generation.models import ClassModel, Dependency, Operation, Parameter


USER_SERVICE_SOURCE = """\
package com.example.service;

import com.example.model.User;
import com.example.repo.UserRepository;
import com.example.notify.Notifier;
import java.io.IOException;
import java.util.List;
import java.util.Optional;
import org.springframework.beans.factory.annotation.Autowired;

public class UserService {

    @Autowired
    private UserRepository userRepository;

    @Autowired
    private Notifier notifier;

    private int cacheSize;

    public Optional<User> findById(Long id) {
        return userRepository.findById(id);
    }

    public List<User> findAll() {
        return userRepository.findAll();
    }

    public void delete(Long id) throws IOException {
        userRepository.deleteById(id);
    }

    public boolean exists(String email) {
        return false;
    }

    private void evict() {
    }

    public static UserService create() {
        return new UserService();
    }

    @Override
    public String toString() {
        return "UserService";
    }
}
"""


@pytest.fixture
def user_service_source() -> str:
    """Java source of a Spring-style service with field injection."""
    return USER_SERVICE_SOURCE


@pytest.fixture
def widget_model() -> ClassModel:
    """Model of a Widget class with a repository and a single getter."""
    return ClassModel(
        package_name="org.sample",
        class_name="Widget",
        dependencies=(Dependency("WidgetRepository", "widgetRepository"),),
        operations=(Operation("get", "Widget", (Parameter("Long", "id"),)),),
    )


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch) -> Path:
    """Point TESTGEN_WORKSPACE at a fresh directory and reset cached settings.

    Yields:
        The workspace directory.
    """
    from testgen.config import load_settings

    workspace = tmp_path / "workspace"
    workspace.mkdir()
    monkeypatch.setenv("TESTGEN_WORKSPACE", str(workspace))
    monkeypatch.delenv("TESTGEN_NAMING_PATTERN", raising=False)

    load_settings.cache_clear()
    yield workspace
    load_settings.cache_clear()

