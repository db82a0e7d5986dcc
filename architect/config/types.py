from dataclasses import dataclass, field

DEFAULT_EXECUTABLE = "a.out"


@dataclass(frozen=True)
class BuildConfig:
    source_files: tuple[str, ...] = ()
    output_executable: str | None = None
    compiler: str | None = None
    compiler_flags: str = ""
    additional_flags: str = ""
    libs: tuple[str, ...] = ()
    output_folder: str = ""
    commands: tuple[str, ...] | None = None

    def executable_name(self) -> str:
        return self.output_executable or DEFAULT_EXECUTABLE

    def executable_path(self) -> str:
        if self.output_folder:
            return f"{self.output_folder}/{self.executable_name()}"
        return self.executable_name()


@dataclass(frozen=True)
class TaskConfig:
    name: str
    commands: tuple[str, ...] | None


@dataclass
class ProjectConfig:
    build: BuildConfig = field(default_factory=BuildConfig)
    tasks: dict[str, TaskConfig] = field(default_factory=dict)


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
