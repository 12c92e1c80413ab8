from dependency_injector import containers, providers
from expense_api.core.settings import settings as default_settings
from expense_api.storage.database.db_connector import (
    build_engine,
    build_session_factory,
    session_dependency,
)
from expense_api.v1_0.v1_containers import APIContainer

class ApplicationContainer(containers.DeclarativeContainer):
    settings = providers.Object(default_settings)

    engine = providers.Singleton(build_engine, settings)
    session_factory = providers.Singleton(build_session_factory, engine)
    get_db = providers.Singleton(session_dependency, session_factory)

    api_container = providers.Container(
        APIContainer
    )
