"""Interface-level constants for the task list TUI."""

STORE_KEY = "todos"

LANG_PACK = {
    "en": {
        "APP_TITLE": "Tasks",
        "INPUT_PLACEHOLDER": "What needs to be done?",
        "BTN_ADD": "[Add]",
        "BTN_EDIT": "✎",
        "BTN_DELETE": "✗",
        "BTN_CLEAR_COMPLETED": "[Clear completed]",
        "FILTER_ALL": "All",
        "FILTER_ACTIVE": "Active",
        "FILTER_COMPLETED": "Completed",
        "COUNTER_TOTAL": "Total: {count}",
        "COUNTER_ACTIVE": "Active: {count}",
        "COUNTER_COMPLETED": "Completed: {count}",
        "EMPTY_ALL": "Add a task to get started",
        "EMPTY_ACTIVE": "No active tasks",
        "EMPTY_COMPLETED": "No completed tasks",
        "ERROR_EMPTY_TASK_ADD": "Please enter a task",
        "ERROR_EMPTY_TASK_EDIT": "A task cannot be empty",
        "ERROR_NOTHING_TO_CLEAR": "There are no completed tasks",
        "CONFIRM_TITLE": "Confirm",
        "CONFIRM_DELETE": "Delete this task? “{text}”",
        "CONFIRM_CLEAR_COMPLETED": "Delete {count} completed task(s)?",
        "CONFIRM_HINT": "y / Enter = yes · n / Esc = no",
        "ALERT_TITLE": "Notice",
        "ALERT_HINT": "Enter / Esc = dismiss",
        "STORE_RESET_WARNING": "Saved tasks could not be read and were reset (backup: {backup})",
        "FOOTER_KEYS": "a add · space toggle · e edit · x delete · 1/2/3 filter · C clear completed · q quit",
        "FOOTER_KEYS_EDITING": "Enter save · Esc cancel · Tab save and leave",
        "FOOTER_KEYS_INPUT": "Enter add · Esc / Tab back to list",
    },
    "ja": {
        "APP_TITLE": "タスク",
        "INPUT_PLACEHOLDER": "新しいタスクを入力...",
        "BTN_ADD": "[追加]",
        "BTN_CLEAR_COMPLETED": "[完了済みを削除]",
        "FILTER_ALL": "すべて",
        "FILTER_ACTIVE": "未完了",
        "FILTER_COMPLETED": "完了済み",
        "COUNTER_TOTAL": "総タスク: {count}",
        "COUNTER_ACTIVE": "未完了: {count}",
        "COUNTER_COMPLETED": "完了: {count}",
        "EMPTY_ALL": "タスクを追加してください",
        "EMPTY_ACTIVE": "未完了のタスクはありません",
        "EMPTY_COMPLETED": "完了済みのタスクはありません",
        "ERROR_EMPTY_TASK_ADD": "タスクを入力してください",
        "ERROR_EMPTY_TASK_EDIT": "タスクは空にできません",
        "ERROR_NOTHING_TO_CLEAR": "完了済みのタスクがありません",
        "CONFIRM_TITLE": "確認",
        "CONFIRM_DELETE": "このタスクを削除してもよろしいですか? 「{text}」",
        "CONFIRM_CLEAR_COMPLETED": "{count}個の完了済みタスクを削除してもよろしいですか?",
        "CONFIRM_HINT": "y / Enter = はい · n / Esc = いいえ",
        "ALERT_TITLE": "お知らせ",
        "ALERT_HINT": "Enter / Esc = 閉じる",
        "STORE_RESET_WARNING": "保存データを読み込めなかったため初期化しました (バックアップ: {backup})",
        "FOOTER_KEYS": "a 追加 · space 完了切替 · e 編集 · x 削除 · 1/2/3 フィルター · C 完了済みを削除 · q 終了",
        "FOOTER_KEYS_EDITING": "Enter 保存 · Esc キャンセル · Tab 保存して移動",
        "FOOTER_KEYS_INPUT": "Enter 追加 · Esc / Tab リストへ戻る",
    },
}
