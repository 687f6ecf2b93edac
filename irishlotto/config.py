from types import MappingProxyType

# ============================================================
# 상수 정의
# ============================================================
APP_CONFIG = {
    'APP_NAME': 'Irish Lotto',
    'VERSION': '1.0',
    'WINDOW_SIZE': (560, 760),
    'CURRENCY': '€',
}

# 게임 규칙 (1~47 중 6개 + 보너스 1개, 1회 2유로)
GAME_RULES = {
    'POOL_SIZE': 47,
    'MAIN_COUNT': 6,
    'STAKE': 2,
    'MAX_HISTORY': 5,
}

# (일치 개수, 보너스 일치) -> 당첨금. 표에 없는 조합은 0
PRIZE_TABLE = MappingProxyType({
    (6, False): 1_000_000,
    (5, True): 5000,
    (5, False): 500,
    (4, True): 50,
    (4, False): 20,
    (3, True): 10,
    (3, False): 3,
    (2, True): 2,
})

BALL_COLORS = {
    '1-10': {'bg': '#FBC400', 'text': 'black', 'gradient': '#FFD700'},
    '11-20': {'bg': '#2980B9', 'text': 'white', 'gradient': '#3498DB'},
    '21-30': {'bg': '#C0392B', 'text': 'white', 'gradient': '#E74C3C'},
    '31-40': {'bg': '#7F8C8D', 'text': 'white', 'gradient': '#95A5A6'},
    '41-47': {'bg': '#27AE60', 'text': 'white', 'gradient': '#2ECC71'},
    'bonus': {'bg': '#FDE047', 'text': 'black', 'gradient': '#FEF08A'},
}

THEMES = {
    'light': {
        'name': 'Light',
        'bg_primary': '#F3F4F6',
        'bg_secondary': '#FFFFFF',
        'bg_tertiary': '#E5E7EB',
        'bg_hover': '#E4E9F2',
        'text_primary': '#111111',
        'text_secondary': '#4B5563',
        'text_muted': '#9CA3AF',
        'border': '#D1D5DB',
        'border_light': '#E5E7EB',
        'accent': '#111111',
        'accent_hover': '#1F2937',
        'accent_light': '#E5E7EB',
        'bonus_border': '#EAB308',
        'success': '#16A34A',
        'success_light': '#DCFCE7',
        'danger': '#DC2626',
        'danger_light': '#FEE2E2',
        'card_bg': '#FFFFFF',
    },
    'dark': {
        'name': 'Dark',
        'bg_primary': '#192038',
        'bg_secondary': '#222B45',
        'bg_tertiary': '#2E3A59',
        'bg_hover': '#3D4D75',
        'text_primary': '#FFFFFF',
        'text_secondary': '#8F9BB3',
        'text_muted': '#586582',
        'border': '#2E3A59',
        'border_light': '#252F4F',
        'accent': '#3366FF',
        'accent_hover': '#598BFF',
        'accent_light': '#1A2138',
        'bonus_border': '#FFAA00',
        'success': '#00D68F',
        'success_light': '#00422D',
        'danger': '#FF3D71',
        'danger_light': '#4D1222',
        'card_bg': '#222B45',
    }
}
