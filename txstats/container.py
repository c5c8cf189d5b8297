"""
Dependency Injection Container.

Este módulo proporciona el contenedor de inyección de dependencias
que gestiona el store de transacciones, el motor de estadísticas y
los casos de uso.

Clean Architecture: Este contenedor vive en la capa más externa y es el único
lugar donde se crean dependencias concretas. Cada app FastAPI tiene el suyo,
así que dos apps (o dos tests) nunca comparten transacciones.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

# Domain
from txstats.domain.repositories.transaction_repository import ITransactionRepository
from txstats.domain.services.statistics_engine import StatisticsEngine
from txstats.domain.services.time_window import Clock, utc_now

# Shared
from txstats.shared.config.settings import Settings


@dataclass
class Container:
    """
    Contenedor de Inyección de Dependencias.

    Gestiona el ciclo de vida de todas las dependencias de la aplicación.
    Sigue el principio de inversión de dependencias: las capas internas
    dependen de abstracciones, no de implementaciones concretas.
    """

    # Configuración
    settings: Settings = field(default_factory=Settings)

    # Reloj compartido por store y engine (reemplazable en tests)
    clock: Clock = utc_now

    # Repositorios (implementaciones concretas)
    _transaction_store: Optional[ITransactionRepository] = None

    # Domain Services
    _statistics_engine: Optional[StatisticsEngine] = None

    @property
    def window(self) -> timedelta:
        return timedelta(seconds=self.settings.window_seconds)

    # ==================== Repositories ====================

    @property
    def transaction_store(self) -> ITransactionRepository:
        """Obtiene o crea el store en memoria (uno por contenedor)."""
        if self._transaction_store is None:
            from txstats.infrastructure.persistence.in_memory_transaction_store import (
                InMemoryTransactionStore,
            )
            self._transaction_store = InMemoryTransactionStore(
                window=self.window, clock=self.clock,
            )
        return self._transaction_store

    # ==================== Domain Services ====================

    @property
    def statistics_engine(self) -> StatisticsEngine:
        """Obtiene o crea el StatisticsEngine (singleton)."""
        if self._statistics_engine is None:
            self._statistics_engine = StatisticsEngine(window=self.window, clock=self.clock)
        return self._statistics_engine

    # ==================== Use Cases ====================

    def get_record_transaction_usecase(self):
        """Factory para RecordTransactionUseCase."""
        from txstats.application.use_cases.record_transaction_usecase import RecordTransactionUseCase
        return RecordTransactionUseCase(transaction_repository=self.transaction_store)

    def get_delete_transactions_usecase(self):
        """Factory para DeleteTransactionsUseCase."""
        from txstats.application.use_cases.delete_transactions_usecase import DeleteTransactionsUseCase
        return DeleteTransactionsUseCase(transaction_repository=self.transaction_store)

    def get_statistics_usecase(self):
        """Factory para GetStatisticsUseCase."""
        from txstats.application.use_cases.get_statistics_usecase import GetStatisticsUseCase
        return GetStatisticsUseCase(
            transaction_repository=self.transaction_store,
            statistics_engine=self.statistics_engine,
        )

    # ==================== Lifecycle ====================

    def reset(self) -> None:
        """Resetea todas las instancias (útil para tests)."""
        self._transaction_store = None
        self._statistics_engine = None

    def override(self, name: str, instance) -> None:
        """
        Override una dependencia (útil para tests con mocks).

        Args:
            name: Nombre de la dependencia (ej: 'transaction_store')
            instance: Instancia a usar
        """
        attr_name = f"_{name}"
        if hasattr(self, attr_name):
            setattr(self, attr_name, instance)
        else:
            raise ValueError(f"Unknown dependency: {name}")


# ==================== Global Container ====================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Obtiene la instancia global del contenedor.

    Solo la usa la app por defecto de txstats.main; create_app()
    acepta un contenedor propio.
    """
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """Resetea el contenedor global."""
    global _container
    if _container is not None:
        _container.reset()
    _container = None


def init_container(settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> Container:
    """
    Inicializa el contenedor global con configuración específica.

    Args:
        settings: Configuración opcional. Si es None, usa valores por defecto.
        clock: Reloj opcional. Si es None, usa UTC real.

    Returns:
        Container inicializado
    """
    global _container
    _container = Container(settings=settings or Settings(), clock=clock or utc_now)
    return _container
