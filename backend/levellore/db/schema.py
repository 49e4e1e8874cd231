# SQLite schema used when STORE_BACKEND=sqlite
# Column names mirror the fields of the JSON data file

STORE_SCHEMA = """
CREATE TABLE IF NOT EXISTS accounts (
    username TEXT PRIMARY KEY,               -- Case-sensitive, never renamed
    password_hash TEXT NOT NULL,             -- bcrypt hash of password
    xp INTEGER NOT NULL DEFAULT 0 CHECK (xp >= 0),
    last_login_date TEXT,                    -- YYYY-MM-DD of last daily-login award
    last_quiz_date TEXT,                     -- YYYY-MM-DD of last quiz award
    profile_pic TEXT                         -- base64 data URI
);

CREATE TABLE IF NOT EXISTS messages (
    seq INTEGER PRIMARY KEY AUTOINCREMENT,   -- Insertion order
    id TEXT UNIQUE NOT NULL,
    username TEXT NOT NULL,
    text TEXT NOT NULL,
    timestamp INTEGER NOT NULL               -- Milliseconds since epoch
);

CREATE INDEX IF NOT EXISTS idx_accounts_xp ON accounts(xp);
"""
