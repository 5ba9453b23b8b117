import pytest

from fhashkit.strings import BASE_LANG, StringsManager
from fhashkit.uistrings import (
    ZH_CN_LANG,
    BaseStrings,
    ZhCnStrings,
    register_default_strings,
)


@pytest.fixture(autouse=True)
def fresh_manager():
    StringsManager.reset_instance()
    yield
    StringsManager.reset_instance()


def test_base_values():
    base = BaseStrings()
    assert base.get("BYTE_STRING") == "Byte(s)"
    assert base.get("MAINDLG_CLEAR") == "Clea&r"
    assert base.get("MAINDLG_INITINFO") == "Drag files here or click open to start calculate."


def test_zh_cn_values():
    zh = ZhCnStrings()
    assert zh.get("BYTE_STRING") == "字节"
    assert zh.get("SECOND_STRING") == "秒"


def test_tables_cover_same_keys():
    assert BaseStrings().keys() == ZhCnStrings().keys()
    assert len(BaseStrings()) > 0


def test_register_default_strings():
    register_default_strings()
    mgr = StringsManager.get_instance()
    assert ZH_CN_LANG == 2052
    assert mgr.get(ZH_CN_LANG, "FILENAME_STRING") == "文件名:"
    assert mgr.get(BASE_LANG, "FILENAME_STRING") == "Name:"


def test_unknown_language_falls_back_to_english():
    register_default_strings()
    mgr = StringsManager.get_instance()
    assert mgr.get(1041, "BUTTON_CANCEL") == "Cancel"
    assert mgr.get(1041, "NOT_A_KEY") == "NOT_A_KEY"