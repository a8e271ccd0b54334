"""User-facing labels, per language.

Kept out of the rendering code so components only ask for a label by name.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.domain.language import Language


@dataclass(frozen=True)
class UiTexts:
    app_title: str
    basic_title: str
    advanced_title: str
    advanced_subtitle: str
    crud_title: str
    users_title: str
    posts_title: str
    loading_users: str
    loading_posts: str
    loading_collection: str
    loading_badge: str
    no_posts: str
    empty_collection: str
    stats_title: str
    total_users: str
    filtered_users: str
    user_posts: str
    user_selected: str
    yes: str
    no: str
    search_prompt: str
    explore_help: str
    saved: str
    deleted: str


_ENGLISH = UiTexts(
    app_title="Fetching Data and CRUD",
    basic_title="1. Basic Fetching Demo",
    advanced_title="2. Advanced Fetching Demo",
    advanced_subtitle="Dependent fetching, search and per-channel loading state",
    crud_title="3. CRUD Operations Demo",
    users_title="Users",
    posts_title="Posts by {name}",
    loading_users="Loading users...",
    loading_posts="Loading posts...",
    loading_collection="Loading {resource}...",
    loading_badge="Loading...",
    no_posts="This user has not written any posts",
    empty_collection="Nothing to show",
    stats_title="Statistics",
    total_users="Total Users",
    filtered_users="Filtered Users",
    user_posts="User Posts",
    user_selected="User Selected",
    yes="Yes",
    no="No",
    search_prompt="search <text> | select <id> | reset | stats | quit",
    explore_help="Unknown command. Use: search <text>, select <id>, reset, stats, quit",
    saved="Saved {resource} #{id}",
    deleted="Deleted {resource} #{id}",
)

_INDONESIAN = UiTexts(
    app_title="Praktik 7: Fetching Data dan CRUD",
    basic_title="1. Basic Fetching Demo",
    advanced_title="2. Advanced Fetching Demo",
    advanced_subtitle="Dependent fetching, search, dan optimisasi",
    crud_title="3. CRUD Operations Demo",
    users_title="Daftar Users",
    posts_title="Posts dari User {name}",
    loading_users="Memuat daftar users...",
    loading_posts="Memuat posts...",
    loading_collection="Memuat {resource}...",
    loading_badge="Loading...",
    no_posts="User ini belum membuat posts",
    empty_collection="Tidak ada data",
    stats_title="Statistics",
    total_users="Total Users",
    filtered_users="Filtered Users",
    user_posts="User Posts",
    user_selected="User Selected",
    yes="Ya",
    no="Tidak",
    search_prompt="search <teks> | select <id> | reset | stats | quit",
    explore_help="Perintah tidak dikenal. Gunakan: search <teks>, select <id>, reset, stats, quit",
    saved="{resource} #{id} tersimpan",
    deleted="{resource} #{id} terhapus",
)

TEXTS: dict[Language, UiTexts] = {
    Language.ENGLISH: _ENGLISH,
    Language.INDONESIAN: _INDONESIAN,
}


def get_texts(language: Language) -> UiTexts:
    return TEXTS.get(language, _ENGLISH)
