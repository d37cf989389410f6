"""Config - Configuracao centralizada do quiz builder via variaveis de ambiente."""

import os
from dataclasses import dataclass, field

from .models.enums import DisplayType

_config: "QuizBuilderConfig | None" = None


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class QuizBuilderConfig:
    """Configuracao do quiz builder.

    Attributes:
        default_title: Titulo de documentos novos
        default_display_type: Modo de exibicao de documentos novos
        default_shuffle: Se documentos novos embaralham as perguntas
        copy_marker: Sufixo anexado ao texto de perguntas duplicadas
        id_prefix: Prefixo dos IDs gerados para perguntas
        preview_text_limit: Tamanho maximo do texto na lista do builder
        log_level: Nivel de log do pacote
        environment: development | production | test
        cors_origins: Origens permitidas no servidor HTTP
    """

    default_title: str = "Novo Quiz"
    default_display_type: DisplayType = DisplayType.SEQUENTIAL
    default_shuffle: bool = False
    copy_marker: str = " (copia)"
    id_prefix: str = "q"
    preview_text_limit: int = 30
    log_level: str = "INFO"
    environment: str = "development"
    cors_origins: list[str] = field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )

    @classmethod
    def from_env(cls) -> "QuizBuilderConfig":
        """Carrega configuracao das variaveis de ambiente."""
        defaults = cls()

        origins = os.getenv("CORS_ORIGINS")
        cors_origins = (
            [o.strip() for o in origins.split(",") if o.strip()]
            if origins
            else defaults.cors_origins
        )

        return cls(
            default_title=os.getenv("QUIZ_DEFAULT_TITLE", defaults.default_title),
            default_display_type=DisplayType(
                os.getenv("QUIZ_DEFAULT_DISPLAY_TYPE", defaults.default_display_type.value)
            ),
            default_shuffle=_env_bool("QUIZ_DEFAULT_SHUFFLE", defaults.default_shuffle),
            copy_marker=os.getenv("QUIZ_COPY_MARKER", defaults.copy_marker),
            id_prefix=os.getenv("QUIZ_ID_PREFIX", defaults.id_prefix),
            preview_text_limit=int(
                os.getenv("QUIZ_PREVIEW_TEXT_LIMIT", str(defaults.preview_text_limit))
            ),
            log_level=os.getenv("LOG_LEVEL", defaults.log_level),
            environment=os.getenv("ENVIRONMENT", defaults.environment),
            cors_origins=cors_origins,
        )

    def to_dict(self) -> dict:
        """Converte para dicionario agrupado por secao."""
        return {
            "document": {
                "default_title": self.default_title,
                "default_display_type": self.default_display_type.value,
                "default_shuffle": self.default_shuffle,
            },
            "editor": {
                "copy_marker": self.copy_marker,
                "id_prefix": self.id_prefix,
                "preview_text_limit": self.preview_text_limit,
            },
            "server": {
                "log_level": self.log_level,
                "environment": self.environment,
                "cors_origins": list(self.cors_origins),
            },
        }


def get_config() -> QuizBuilderConfig:
    """Retorna configuracao global (carregada uma unica vez)."""
    global _config
    if _config is None:
        _config = QuizBuilderConfig.from_env()
    return _config


def reload_config() -> QuizBuilderConfig:
    """Recarrega configuracao do ambiente."""
    global _config
    _config = QuizBuilderConfig.from_env()
    return _config
