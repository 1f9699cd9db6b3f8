import yaml
import os
from typing import Optional
from pydantic import BaseModel
from dotenv import load_dotenv

from tcconvert.models.testcase_import import InputFormat

# 載入 .env 檔案（如果存在）
load_dotenv()


class AppConfig(BaseModel):
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 9999

    @classmethod
    def from_env(cls, fallback: 'AppConfig' = None) -> 'AppConfig':
        """從環境變數載入設定，如果環境變數為空則使用 fallback"""
        return cls(
            debug=os.getenv('DEBUG', str(fallback.debug).lower() if fallback else 'false').lower() == 'true',
            host=os.getenv('HOST', fallback.host if fallback else '0.0.0.0'),
            port=int(os.getenv('PORT', str(fallback.port) if fallback else '9999')),
        )


class ConverterConfig(BaseModel):
    """測試案例轉換設定"""
    default_input_format: InputFormat = InputFormat.BDD
    csv_filename: str = "testcases.csv"
    csv_media_type: str = "text/csv; charset=utf-8"
    # 0 代表不限制輸入長度
    max_input_chars: int = 0

    @classmethod
    def from_env(cls, fallback: 'ConverterConfig' = None) -> 'ConverterConfig':
        default_format = fallback.default_input_format.value if fallback else InputFormat.BDD.value
        return cls(
            default_input_format=InputFormat(
                os.getenv('DEFAULT_INPUT_FORMAT', default_format).strip().lower()
            ),
            csv_filename=os.getenv('CSV_FILENAME', fallback.csv_filename if fallback else 'testcases.csv'),
            csv_media_type=fallback.csv_media_type if fallback else 'text/csv; charset=utf-8',
            max_input_chars=int(os.getenv('MAX_INPUT_CHARS', str(fallback.max_input_chars if fallback else 0))),
        )


class Settings(BaseModel):
    app: AppConfig = AppConfig()
    converter: ConverterConfig = ConverterConfig()

    @classmethod
    def from_env_and_file(cls, config_path: Optional[str] = None) -> 'Settings':
        """從環境變數和 YAML 檔案載入設定（環境變數優先）"""
        config_path = config_path or os.getenv('TCCONVERT_CONFIG', 'config.yaml')
        if os.path.exists(config_path):
            with open(config_path, 'r', encoding='utf-8') as file:
                config_data = yaml.safe_load(file) or {}
            base_settings = cls(**config_data)
        else:
            base_settings = cls()

        # 環境變數覆蓋檔案設定（僅當環境變數存在時）
        return cls(
            app=AppConfig.from_env(base_settings.app),
            converter=ConverterConfig.from_env(base_settings.converter),
        )


def load_config(config_path: Optional[str] = None) -> Settings:
    """讀取 YAML 設定檔"""
    return Settings.from_env_and_file(config_path)


def create_default_config(config_path: str = "config.yaml") -> None:
    """建立預設設定檔"""
    default_config = {
        "app": {
            "debug": False,
            "host": "0.0.0.0",
            "port": 9999,
        },
        "converter": {
            "default_input_format": InputFormat.BDD.value,
            "csv_filename": "testcases.csv",
            "csv_media_type": "text/csv; charset=utf-8",
            "max_input_chars": 0,
        },
    }

    with open(config_path, 'w', encoding='utf-8') as file:
        yaml.dump(default_config, file, default_flow_style=False, allow_unicode=True)


# 全域設定實例
settings = Settings.from_env_and_file()


def get_settings() -> Settings:
    """取得設定實例"""
    return settings
