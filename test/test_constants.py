"""
Test Constants - Fixed UUIDs for Testing

Fixed UUID7 strings keep test output predictable and easy to debug.
"""

# ============================================================================
# Auditoriums and sessions
# ============================================================================
TEST_AUDITORIUM_ID_1 = '019a1af7-0000-7001-0000-000000000001'
TEST_AUDITORIUM_ID_2 = '019a1af7-0000-7001-0000-000000000002'
TEST_SESSION_ID_1 = '019a1af7-0000-7002-0000-000000000001'
TEST_SESSION_ID_2 = '019a1af7-0000-7002-0000-000000000002'
TEST_SESSION_ID_WITHOUT_AUDITORIUM = '019a1af7-0000-7002-0000-0000000000ff'
UNKNOWN_SESSION_ID = '019a1af7-0000-7002-0000-00000000dead'

# ============================================================================
# Carts and users
# ============================================================================
UNKNOWN_CART_ID = '019a1af7-0000-7003-0000-00000000dead'
TEST_USER_ID_1 = '019a1af7-0000-7004-0000-000000000001'

# ============================================================================
# Prices (cents)
# ============================================================================
TEST_BASE_PRICE = 3200
TEST_VIP_PRICE = 4500

# ============================================================================
# Layouts
# ============================================================================
# Row A: 10 standard seats; row B: 8 seats, 1-2 wheelchair
SCENARIO_LAYOUT = {
    'rows': [
        {'label': 'A', 'seat_count': 10},
        {'label': 'B', 'seat_count': 8, 'seat_types': {'1': 'WHEELCHAIR', '2': 'WHEELCHAIR'}},
    ]
}
SCENARIO_SEAT_COUNT = 18

SEAT_MAP_CONFIG = {
    'rowsConfig': [{'row': 'A', 'seatCount': 10}, {'row': 'B', 'seatCount': 10}],
    'vipZones': [{'rows': ['B'], 'fromPercent': 0.3, 'toPercent': 0.7}],
    'accessible': [{'row': 'B', 'seats': [5]}],
}

QUEUE_SCOPE_KEY = 'the-odyssey-global'
