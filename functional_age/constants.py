"""Scoring tables for the Functional Age assessment.

Offsets are signed years: negative reads younger, positive older. Unknown
categorical answers score 0 (the "average" bucket where the scale has one).
"""

from __future__ import annotations

# ------------------------- Sit-to-stand -------------------------

# (upper age bound exclusive, expected reps); ages >= 70 expect 10
EXPECTED_REPS_BY_AGE = [(40, 20), (50, 17), (60, 15), (70, 12)]
EXPECTED_REPS_OLDEST = 10

# (minimum reps-over-expected, offset), checked in order; below all → +4
REPS_DIFF_OFFSETS = [(5, -3), (2, -1), (-2, 0), (-5, 2)]
REPS_DIFF_FLOOR_OFFSET = 4

# (max perceived exertion 0-10, offset); above all → +2
EXERTION_OFFSETS = [(3, -1), (5, 0), (7, 1)]
EXERTION_CEILING_OFFSET = 2

# ------------------------- Wall sit -------------------------

WALL_SIT_DURATION = {
    '<30s': 4,
    '30-60s': 2,
    '60-120s': 0,
    '2-3m': -2,
    '3m+': -4,
}

WALL_SIT_STOP_REASON = {
    'muscle-pain': 0,
    'breathlessness': 1,
    'joint-discomfort': 2,
    'mental-discomfort': -1,
}

# ------------------------- Balance -------------------------

BALANCE_DURATION = {
    '<10s': 5,
    '10-20s': 3,
    '20-40s': 1,
    '40-60s': -1,
    '60s+': -3,
}

BALANCE_END_REASON = {
    'ankle-wobble': 1,
    'hip-instability': 2,
    'loss-of-focus': 0,
    'stopped-intentionally': -1,
}

# ------------------------- March + recovery -------------------------

# (max breathing difficulty 0-10, offset); above all → +4
BREATHING_DIFFICULTY_OFFSETS = [(3, -2), (5, 0), (7, 2)]
BREATHING_DIFFICULTY_CEILING_OFFSET = 4

RECOVERY_TIME = {
    '<30s': -3,
    '30-60s': -1,
    '1-2m': 1,
    '>2m': 3,
}

# (min nose-breathing comfort 0-10, offset); below all → +2
NOSE_BREATHING_OFFSETS = [(8, -2), (5, 0), (3, 1)]
NOSE_BREATHING_FLOOR_OFFSET = 2

# ------------------------- Mobility -------------------------

OVERHEAD_REACH = {
    'yes-easily': -2,
    'yes-with-effort': 0,
    'compensate': 2,
    'discomfort': 3,
}

# no zero bucket in the answer scale; unknown answers score 0
CROSS_LEGGED = {
    'yes-relaxed': -2,
    'yes-stiff': 1,
    'only-briefly': 2,
    'not-at-all': 4,
}

# ------------------------- Integration / recovery context -------------------------

ENERGY_LEVEL = {
    'energized': -2,
    'neutral': 0,
    'slightly-drained': 1,
    'very-drained': 3,
}

COORDINATION_LEVEL = {
    'coordinated': -2,
    'functional-but-stiff': 0,
    'disconnected': 2,
    'fragile': 4,
}

MORNING_STIFFNESS = {
    'none': -2,
    '<5m': 0,
    '5-15m': 2,
    '>15m': 4,
}

POST_WORKOUT_SORENESS = {
    '<24h': -2,
    '1-2d': 0,
    '3+d': 3,
    'avoid-workouts': 4,
}

FITNESS_ADJUSTMENT = {
    'beginner': 2,
    'intermediate': 0,
    'advanced': -2,
}

# ------------------------- Skip penalties -------------------------

SKIP_PENALTY_SIT_TO_STAND = 3
SKIP_PENALTY_WALL_SIT = 3
SKIP_PENALTY_BALANCE = 4
SKIP_PENALTY_CARDIO = 3
SKIP_PENALTY_RECOVERY_SPEED = 3

# ------------------------- Drivers -------------------------

LOWER_BODY = 'Lower-body capacity'
BALANCE = 'Balance/coordination'
CARDIO = 'Cardiovascular fitness'
RECOVERY_SPEED = 'Recovery speed'
MOBILITY = 'Mobility'
MENTAL_RESILIENCE = 'Mental resilience'
JOINT_HEALTH = 'Joint health'

# Ranked drivers in input order (ties resolve to this order) with their max |score|
DRIVER_MAX = {
    LOWER_BODY: 8,
    BALANCE: 8,
    CARDIO: 6,
    RECOVERY_SPEED: 6,
    MOBILITY: 8,
}

DRIVER_SUGGESTIONS = {
    RECOVERY_SPEED: {
        'positive': 'Your recovery is excellent. Keep prioritizing sleep and down-regulation.',
        'negative': 'Focus on down-regulation practices like breathing exercises and quality sleep.',
    },
    BALANCE: {
        'positive': 'Great proprioception! Single-leg exercises are working well.',
        'negative': 'Practice single-leg stands and add balance challenges to your routine.',
    },
    LOWER_BODY: {
        'positive': 'Strong lower body foundation. Maintain with regular strength work.',
        'negative': 'Add bodyweight squats and lunges to build lower-body strength.',
    },
    MOBILITY: {
        'positive': 'Excellent mobility. Your movement practice is paying off.',
        'negative': 'Incorporate daily stretching and mobility flows, especially for hips and shoulders.',
    },
    CARDIO: {
        'positive': 'Great aerobic base. Keep up the consistent movement.',
        'negative': 'Build aerobic capacity with walking, cycling, or swimming at conversational pace.',
    },
    # Not produced by any scoring path yet
    MENTAL_RESILIENCE: {
        'positive': 'Strong mental fortitude during challenging exercises.',
        'negative': 'Practice staying present during discomfort with breath-focused exercises.',
    },
    JOINT_HEALTH: {
        'positive': 'Joints seem healthy and pain-free.',
        'negative': 'Consider joint-friendly movements and consult a professional if discomfort persists.',
    },
}
