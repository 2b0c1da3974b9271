from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from supabase import Client, create_client


@dataclass
class SupabaseConfig:
    url: str
    key: str


class SupabaseConnection:
    """Singleton-like Supabase client factory.

    Note: `client()` is shared by the process for table queries and never signs
    in. Auth calls get a fresh client from `new_client()` so one caller's login
    session is never visible to another.
    """

    _instance: Optional["SupabaseConnection"] = None

    def __init__(
        self,
        config: SupabaseConfig,
        *,
        client: Optional[Client] = None,
        client_factory: Optional[Callable[[], Client]] = None,
    ):
        self._config = config
        self._client = client
        self._client_factory = client_factory

    @classmethod
    def get_instance(cls, config: SupabaseConfig) -> "SupabaseConnection":
        if cls._instance is None:
            cls._instance = SupabaseConnection(config)
        return cls._instance

    def new_client(self) -> Client:
        if self._client_factory is not None:
            return self._client_factory()
        return create_client(self._config.url, self._config.key)

    def client(self) -> Client:
        if self._client is None:
            self._client = self.new_client()
        return self._client
