"""Shared constants used across the project."""

# Server identity (every variant announces the same name)
SERVER_NAME = "prompt-server"
SERVER_VERSION = "1.0.0"

# Variant names accepted by the entry point
SERVER_VARIANT_POSTS = "posts"
SERVER_VARIANT_ICEBREAKER = "icebreaker"
SERVER_VARIANT_AGENDAS = "agendas"
SERVER_VARIANT_AGENDAS_JSON = "agendas-json"
DEFAULT_SERVER_VARIANT = SERVER_VARIANT_ICEBREAKER

# Transport defaults
DEFAULT_TRANSPORT = "stdio"
SUPPORTED_TRANSPORTS = ("stdio", "http", "sse")
DEFAULT_PORT = 8000

# Upstream posts API
POSTS_URL = "https://jsonplaceholder.typicode.com/posts"
POSTS_LIMIT = 5

# Prompt registration
POEM_PROMPT_NAME = "poem-writer"
POEM_PROMPT_TITLE = "Poem Writer"
POEM_PROMPT_DESCRIPTION = "Write a nice haiku"

# Icebreaker questions for the morning meeting
ICEBREAKERS = (
    "朝食はパン派？ごはん派？",
    "好きな季節とその理由は？",
    "最近ハマっているものは何ですか？",
    "もし一つだけ超能力が使えるなら何を選びますか？",
    "無人島に3つだけ持っていけるとしたら？",
    "今までで一番おいしかった食べ物は？",
    "座右の銘や好きな言葉は？",
    "休日の理想の過ごし方は？",
    "今までで一番笑った出来事は？",
    "行ってみたい国や場所は？",
    "もし宝くじが当たったら何をしますか？",
    "最近感動したことは？",
    "子供の頃の夢は何でしたか？",
    "好きな映画やドラマのジャンルは？",
    "今一番欲しいものは？",
    "得意料理や好きな食べ物は？",
    "ストレス解消法は？",
    "最近買ってよかったものは？",
    "もしタイムマシンがあったら過去と未来どっちに行く？",
    "人生で一番影響を受けた人は？",
    "今までで一番頑張ったことは？",
    "理想の休日は？",
    "最近始めたことや挑戦していることは？",
    "自分の長所を一つ教えてください",
    "好きな音楽のジャンルやアーティストは？",
)
