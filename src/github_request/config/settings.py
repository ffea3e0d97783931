"""配置管理模块 - 使用 Pydantic

集中管理所有配置项，支持环境变量、.env 文件和配置验证。
"""

import logging
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_prefix="APP_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # 日志级别
    log_level: str = Field(default="INFO", description="日志级别")

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """确保日志级别合法"""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {v}")
        return level


class GitHubConfig(BaseSettings):
    """GitHub API 配置"""

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API 地址
    host: str = Field(default="https://api.github.com", description="API 地址")

    # 默认仓库
    owner: Optional[str] = Field(default=None, description="默认仓库所有者")
    repo: Optional[str] = Field(default=None, description="默认仓库名称")

    # 访问令牌
    token: Optional[str] = Field(default=None, description="访问令牌")

    # 调试模式（记录成功请求）
    debug: bool = Field(default=False, description="是否记录成功请求日志")

    # 请求超时（秒）
    timeout: int = Field(default=30, ge=1, le=300, description="请求超时时间（秒）")

    # SSL 验证
    verify_ssl: bool = Field(default=True, description="是否验证 SSL 证书")

    user_agent: str = Field(default="github-request", description="User-Agent")

    @field_validator("host", mode="after")
    @classmethod
    def strip_host(cls, v: str) -> str:
        """去掉末尾的斜杠"""
        return v.rstrip("/")


class Config(BaseSettings):
    """全局配置"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    app: AppConfig = Field(default_factory=AppConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
