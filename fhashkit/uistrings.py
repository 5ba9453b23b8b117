"""The application's built-in English and Simplified Chinese UI strings."""

from __future__ import annotations

from fhashkit.strings import BASE_LANG, StringTable, register_strings_for_lang

ZH_CN_LANG = 2052

_BASE = {
    # Global strings
    "FILE_STRING": "File",
    "BYTE_STRING": "Byte(s)",
    "HASHVALUE_STRING": "Hash:",
    "FILENAME_STRING": "Name:",
    "FILESIZE_STRING": "File Size:",
    "MODIFYTIME_STRING": "Modified Date:",
    "VERSION_STRING": "Version:",
    "SECOND_STRING": "s",
    "BUTTON_OK": "OK",
    "BUTTON_CANCEL": "Cancel",
    # Main window strings
    "MAINDLG_INITINFO": "Drag files here or click open to start calculate.",
    "MAINDLG_WAITING_START": "Prepare to start calculation.",
    "MAINDLG_CONTEXT_INIT": "Need Administrator",
    "MAINDLG_ADD_SUCCEEDED": "Add Succeeded",
    "MAINDLG_ADD_FAILED": "Add Failed",
    "MAINDLG_REMOVE_SUCCEEDED": "Remove Succeeded",
    "MAINDLG_REMOVE_FAILED": "Remove Failed",
    "MAINDLG_REMOVE_CONTEXT_MENU": "Remove Context Menu",
    "MAINDLG_ADD_CONTEXT_MENU": "Add to Context Menu",
    "MAINDLG_CLEAR": "Clea&r",
    "MAINDLG_CLEAR_VERIFY": "Clea&r Verify",
    "MAINDLG_CALCU_TERMINAL": "Terminated",
    "MAINDLG_FIND_IN_RESULT": "Verify",
    "MAINDLG_RESULT": "Result:",
    "MAINDLG_NORESULT": "Nothing found",
    "MAINDLG_FILE_PROGRESS": "File",
    "MAINDLG_TOTAL_PROGRESS": "Total",
    "MAINDLG_UPPER_HASH": "Uppercase",
    "MAINDLG_TIME_TITLE": "Time Used:",
    "MAINDLG_OPEN": "&Open...",
    "MAINDLG_STOP": "&Stop",
    "MAINDLG_COPY": "&Copy",
    "MAINDLG_VERIFY": "&Verify",
    "MAINDLG_ABOUT": "&About",
    "MAINDLG_EXIT": "E&xit",
    "MAINDLG_HYPEREDIT_MENU_COPY": "Copy hash value",
    "MAINDLG_HYPEREDIT_MENU_SERACHGOOGLE": "Search Google",
    "MAINDLG_HYPEREDIT_MENU_SERACHVIRUSTOTAL": "Search VirusTotal",
    # Verify dialog strings
    "FINDDLG_TITLE": "Verify",
    # About dialog strings
    "ABOUTDLG_TITLE": "About fHash",
    "ABOUTDLG_INFO_TITLE": "fHash: Files Hash Calculator",
    "ABOUTDLG_INFO_RIGHTDETAIL": "More details are on Project Site.",
    "ABOUTDLG_INFO_OSTITLE": "Operating System:",
    "ABOUTDLG_PROJECT_SITE": "<a>Project Site</a>",
}

_ZH_CN = {
    # Global strings
    "FILE_STRING": "文件",
    "BYTE_STRING": "字节",
    "HASHVALUE_STRING": "Hash 值:",
    "FILENAME_STRING": "文件名:",
    "FILESIZE_STRING": "文件大小:",
    "MODIFYTIME_STRING": "修改日期:",
    "VERSION_STRING": "版本:",
    "SECOND_STRING": "秒",
    "BUTTON_OK": "确定",
    "BUTTON_CANCEL": "取消",
    # Main window strings
    "MAINDLG_INITINFO": "将文件拖入或点击打开，开始计算。",
    "MAINDLG_WAITING_START": "准备开始计算。",
    "MAINDLG_CONTEXT_INIT": "需要管理员权限",
    "MAINDLG_ADD_SUCCEEDED": "添加成功",
    "MAINDLG_ADD_FAILED": "添加失败",
    "MAINDLG_REMOVE_SUCCEEDED": "移除成功",
    "MAINDLG_REMOVE_FAILED": "移除失败",
    "MAINDLG_REMOVE_CONTEXT_MENU": "移除右键菜单",
    "MAINDLG_ADD_CONTEXT_MENU": "添加右键菜单",
    "MAINDLG_CLEAR": "清除(&R)",
    "MAINDLG_CLEAR_VERIFY": "清除验证(&R)",
    "MAINDLG_CALCU_TERMINAL": "计算终止",
    "MAINDLG_FIND_IN_RESULT": "在结果中搜索",
    "MAINDLG_RESULT": "匹配的结果:",
    "MAINDLG_NORESULT": "无匹配结果",
    "MAINDLG_FILE_PROGRESS": "文件进度",
    "MAINDLG_TOTAL_PROGRESS": "总体进度",
    "MAINDLG_UPPER_HASH": "大写 Hash",
    "MAINDLG_TIME_TITLE": "计算时间:",
    "MAINDLG_OPEN": "打开(&O)...",
    "MAINDLG_STOP": "停止(&S)",
    "MAINDLG_COPY": "全部复制(&C)",
    "MAINDLG_VERIFY": "验证(&V)",
    "MAINDLG_ABOUT": "关于(&A)",
    "MAINDLG_EXIT": "退出(&X)",
    "MAINDLG_HYPEREDIT_MENU_COPY": "复制哈希值",
    "MAINDLG_HYPEREDIT_MENU_SERACHGOOGLE": "搜索 Google",
    "MAINDLG_HYPEREDIT_MENU_SERACHVIRUSTOTAL": "搜索 VirusTotal",
    # Verify dialog strings
    "FINDDLG_TITLE": "验证",
    # About dialog strings
    "ABOUTDLG_TITLE": "关于 fHash",
    "ABOUTDLG_INFO_TITLE": "fHash: 文件 Hash 计算器",
    "ABOUTDLG_INFO_RIGHTDETAIL": "详细授权信息见开发者网站。",
    "ABOUTDLG_INFO_OSTITLE": "当前操作系统:",
    "ABOUTDLG_PROJECT_SITE": "<a>项目网站</a>",
}


class BaseStrings(StringTable):
    """English strings, used as the fallback for every language."""

    def __init__(self) -> None:
        super().__init__(_BASE)


class ZhCnStrings(StringTable):
    """Simplified Chinese strings."""

    def __init__(self) -> None:
        super().__init__(_ZH_CN)


def register_default_strings() -> None:
    """Register the built-in tables with the shared strings manager."""
    register_strings_for_lang(BASE_LANG, BaseStrings())
    register_strings_for_lang(ZH_CN_LANG, ZhCnStrings())