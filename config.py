#!/usr/bin/env python3
"""
配置文件 - Skytrail 航段训练器配置
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# 题库数据库（唯一的连接字符串）
CATALOG_DATABASE_URL = os.getenv("CATALOG_DATABASE_URL", "sqlite:///pstar_catalog.db")

# Web 服务配置
SECRET_KEY = os.getenv("SECRET_KEY", "skytrail-dev-secret")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5001"))

# 会话动作日志目录（每个会话一个 JSON Lines 文件）
LOG_DIR = os.getenv("LOG_DIR", "logs")

# 掌握度记录文件（留空则只保存在内存中）
MASTERY_PATH = os.getenv("MASTERY_PATH", "mastery.json")

# 启动时检查题库完整性，有缺陷则拒绝启动
VALIDATE_ON_STARTUP = _env_flag("VALIDATE_ON_STARTUP", True)

# 题库为空时自动用静态表写入
AUTO_SEED = _env_flag("AUTO_SEED", True)
