from configfactory._internal.integrations.pytest_plugin import (
    ContainerCall,
    RecordingContainer,
    configfactory_container,
)

__all__ = ["ContainerCall", "RecordingContainer", "configfactory_container"]
