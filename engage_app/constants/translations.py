"""Translation tables for the supported interface languages."""

from __future__ import annotations

EN: dict[str, str] = {
    "Timer": "Timer",
    "Polling": "Polling",
    "Q&A": "Q&A",
    "Word Cloud": "Word Cloud",
    "Quiz": "Quiz",
    "room_code": "Room Code",
    "enter_room_code": "Enter room code",
    "invalid_room_code": "Invalid Room Code",
    "host_view": "Host View",
    "participant_view": "Participant View",
    "session_agenda": "Session Agenda",
    "agenda_item_title": "Agenda item title",
    "duration_in_minutes": "Duration (minutes)",
    "add_item": "Add Item",
    "add_item_to_start": "Add an agenda item to start",
    "waiting_for_host_to_start": "Waiting for the host to start",
    "time_left": "Time left",
    "start": "Start",
    "pause": "Pause",
    "resume": "Resume",
    "reset": "Reset",
    "session_complete": "Session complete!",
    "create_poll": "Create a Poll",
    "poll_question": "Poll question",
    "multiple_choice": "Multiple Choice",
    "open_text": "Open Text",
    "option": "Option",
    "add_option": "Add Option",
    "start_polling": "Start Polling",
    "submit_vote": "Submit Vote",
    "view_results": "View Results",
    "back_to_voting": "Back to Voting",
    "new_poll": "New Poll",
    "no_active_poll": "No active poll",
    "ask_a_question": "Ask a question",
    "your_name": "Your name (optional)",
    "anonymous": "Anonymous",
    "sort_by_upvotes": "Sort by upvotes",
    "answered": "Answered",
    "mark_as_answered": "Mark as answered",
    "enter_word": "Enter a word",
    "submit_word": "Submit",
    "enter_your_name": "Enter your name",
    "join_quiz": "Join Quiz",
    "start_quiz": "Start Quiz",
    "question": "Question",
    "you_are_correct": "Correct!",
    "you_are_wrong": "Wrong answer",
    "next": "Next",
    "leaderboard": "Leaderboard",
    "play_again": "Play Again",
}

ZH: dict[str, str] = {
    "Timer": "计时器",
    "Polling": "投票",
    "Q&A": "问答",
    "Word Cloud": "词云",
    "Quiz": "测验",
    "room_code": "房间码",
    "enter_room_code": "输入房间码",
    "invalid_room_code": "房间码无效",
    "host_view": "主持人视图",
    "participant_view": "参与者视图",
    "session_agenda": "会议议程",
    "agenda_item_title": "议程项目标题",
    "duration_in_minutes": "时长（分钟）",
    "add_item": "添加项目",
    "add_item_to_start": "添加议程项目以开始",
    "waiting_for_host_to_start": "等待主持人开始",
    "time_left": "剩余时间",
    "start": "开始",
    "pause": "暂停",
    "resume": "继续",
    "reset": "重置",
    "session_complete": "会议结束！",
    "create_poll": "创建投票",
    "poll_question": "投票问题",
    "multiple_choice": "多项选择",
    "open_text": "开放式回答",
    "option": "选项",
    "add_option": "添加选项",
    "start_polling": "开始投票",
    "submit_vote": "提交投票",
    "view_results": "查看结果",
    "back_to_voting": "返回投票",
    "new_poll": "新投票",
    "no_active_poll": "当前没有投票",
    "ask_a_question": "提出问题",
    "your_name": "你的名字（可选）",
    "anonymous": "匿名",
    "sort_by_upvotes": "按点赞排序",
    "answered": "已回答",
    "mark_as_answered": "标记为已回答",
    "enter_word": "输入一个词",
    "submit_word": "提交",
    "enter_your_name": "输入你的名字",
    "join_quiz": "加入测验",
    "start_quiz": "开始测验",
    "question": "问题",
    "you_are_correct": "回答正确！",
    "you_are_wrong": "回答错误",
    "next": "下一题",
    "leaderboard": "排行榜",
    "play_again": "再玩一次",
}
