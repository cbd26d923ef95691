# skilldrill/seed_data.py
# Sample records for development databases. Ages are in days before "now";
# drills reference skills by name and sessions reference drills by position.

SAMPLE_USERS = [
    {"user_id": "user_2abc123def456", "name": "Alex Johnson", "days_ago": 30},
    {"user_id": "user_3def456ghi789", "name": "Sarah Chen", "days_ago": 15},
    {"user_id": "user_4ghi789jkl012", "name": "Mike Rodriguez", "days_ago": 7},
]

SAMPLE_SKILLS = [
    {
        "name": "Basketball",
        "categories": ["shooting", "dribbling", "defense", "passing", "rebounding"],
        "days_ago": 25,
    },
    {
        "name": "Piano",
        "categories": ["scales", "chords", "sight-reading", "improvisation", "classical"],
        "days_ago": 20,
    },
    {
        "name": "LeetCode",
        "categories": ["arrays", "strings", "trees", "graphs", "dynamic-programming"],
        "days_ago": 18,
    },
    {
        "name": "Guitar",
        "categories": ["strumming", "fingerpicking", "chords", "scales", "songs"],
        "days_ago": 12,
    },
    {
        "name": "Cooking",
        "categories": ["knife-skills", "sauces", "baking", "grilling", "meal-planning"],
        "days_ago": 10,
    },
    {
        "name": "Photography",
        "categories": ["composition", "lighting", "editing", "portraits", "landscape"],
        "days_ago": 8,
    },
]

SAMPLE_DRILLS = [
    # 0-2 Basketball
    {
        "skill": "Basketball",
        "category": "shooting",
        "difficulty": "Beginner",
        "description": (
            "Practice free throws for 15 minutes. Focus on proper form: feet shoulder-width "
            "apart, knees slightly bent, follow through with your shooting hand. Aim for 70% accuracy."
        ),
        "days_ago": 20,
        "created_by": "user_2abc123def456",
    },
    {
        "skill": "Basketball",
        "category": "dribbling",
        "difficulty": "Intermediate",
        "description": (
            "Practice crossover dribbles while walking up and down the court. Start with basic "
            "crossovers, then progress to behind-the-back and between-the-legs moves. "
            "Do 3 sets of 10 reps each."
        ),
        "days_ago": 18,
        "created_by": "user_2abc123def456",
    },
    {
        "skill": "Basketball",
        "category": "defense",
        "difficulty": "Advanced",
        "description": (
            "Defensive slide drills: Set up cones in a zigzag pattern. Practice defensive slides "
            "while maintaining proper stance. Focus on quick direction changes and keeping your hands up."
        ),
        "days_ago": 15,
        "created_by": "user_3def456ghi789",
    },
    # 3-5 Piano
    {
        "skill": "Piano",
        "category": "scales",
        "difficulty": "Beginner",
        "description": (
            "Practice C major scale with both hands, 2 octaves up and down. Focus on even timing "
            "and proper finger positioning. Play at 60 BPM for 10 minutes."
        ),
        "days_ago": 19,
        "created_by": "user_3def456ghi789",
    },
    {
        "skill": "Piano",
        "category": "chords",
        "difficulty": "Intermediate",
        "description": (
            "Practice major and minor triads in all keys. Play each chord 4 times with a metronome "
            "at 80 BPM. Focus on smooth transitions between chords."
        ),
        "days_ago": 16,
        "created_by": "user_3def456ghi789",
    },
    {
        "skill": "Piano",
        "category": "sight-reading",
        "difficulty": "Advanced",
        "description": (
            "Sight-read a new piece of music for 20 minutes. Choose something slightly above your "
            "current level. Focus on reading ahead and maintaining steady tempo."
        ),
        "days_ago": 12,
        "created_by": "user_4ghi789jkl012",
    },
    # 6-8 LeetCode
    {
        "skill": "LeetCode",
        "category": "arrays",
        "difficulty": "Beginner",
        "description": (
            "Solve 3 array problems: Two Sum, Remove Duplicates from Sorted Array, and Best Time "
            "to Buy and Sell Stock. Focus on understanding the problem before coding."
        ),
        "days_ago": 17,
        "created_by": "user_4ghi789jkl012",
    },
    {
        "skill": "LeetCode",
        "category": "trees",
        "difficulty": "Intermediate",
        "description": (
            "Practice tree traversal problems: Binary Tree Inorder Traversal, Maximum Depth of "
            "Binary Tree, and Validate Binary Search Tree. Implement both recursive and iterative solutions."
        ),
        "days_ago": 14,
        "created_by": "user_2abc123def456",
    },
    {
        "skill": "LeetCode",
        "category": "dynamic-programming",
        "difficulty": "Advanced",
        "description": (
            "Solve Climbing Stairs, House Robber, and Longest Increasing Subsequence. Focus on "
            "identifying the optimal substructure and overlapping subproblems."
        ),
        "days_ago": 10,
        "created_by": "user_3def456ghi789",
    },
    # 9-10 Guitar
    {
        "skill": "Guitar",
        "category": "chords",
        "difficulty": "Beginner",
        "description": (
            "Practice transitioning between G, C, and D major chords. Strum each chord 4 times "
            "before changing. Focus on clean chord changes without buzzing strings."
        ),
        "days_ago": 11,
        "created_by": "user_4ghi789jkl012",
    },
    {
        "skill": "Guitar",
        "category": "fingerpicking",
        "difficulty": "Intermediate",
        "description": (
            "Practice Travis picking pattern with G, C, and D chords. Use thumb for bass notes "
            "and fingers for melody. Start slow and gradually increase tempo."
        ),
        "days_ago": 8,
        "created_by": "user_2abc123def456",
    },
    # 11 Cooking
    {
        "skill": "Cooking",
        "category": "knife-skills",
        "difficulty": "Beginner",
        "description": (
            "Practice basic knife cuts: julienne, brunoise, and chiffonade. Use carrots, celery, "
            "and herbs. Focus on consistent size and proper knife grip."
        ),
        "days_ago": 9,
        "created_by": "user_3def456ghi789",
    },
    # 12 Photography
    {
        "skill": "Photography",
        "category": "composition",
        "difficulty": "Beginner",
        "description": (
            "Practice rule of thirds composition. Take 20 photos of everyday objects, placing the "
            "main subject at the intersection points of the rule of thirds grid."
        ),
        "days_ago": 7,
        "created_by": "user_4ghi789jkl012",
    },
]

SAMPLE_SESSIONS = [
    # Alex
    {"user": 0, "drill": 0, "days_ago": 2,
     "notes": "Great session! Hit 75% of free throws. Need to work on consistency."},
    {"user": 0, "drill": 3, "days_ago": 3,
     "notes": "C major scale is getting smoother. Need to practice with metronome more."},
    {"user": 0, "drill": 6, "days_ago": 1,
     "notes": ("Two Sum was easy, but struggled with the stock problem. "
               "Need to review dynamic programming concepts.")},
    # Sarah
    {"user": 1, "drill": 1, "days_ago": 1,
     "notes": "Crossover moves are improving! Behind-the-back still needs work."},
    {"user": 1, "drill": 4, "days_ago": 2,
     "notes": "Chord transitions are getting faster. Minor chords still feel awkward."},
    {"user": 1, "drill": 7, "days_ago": 4,
     "notes": "Tree traversal is clicking! Recursive solutions are more intuitive for me."},
    # Mike
    {"user": 2, "drill": 2, "days_ago": 1,
     "notes": "Defensive slides are exhausting but effective. Need to work on stamina."},
    {"user": 2, "drill": 5, "days_ago": 3,
     "notes": "Sight-reading is challenging but rewarding. Need to practice reading ahead more."},
    {"user": 2, "drill": 8, "days_ago": 2,
     "notes": "DP problems are tough! Need to draw out the problem more before coding."},
]
