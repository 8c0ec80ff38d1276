"""
Sample records used by the offline services when the backend is unreachable.

Records are kept in the backend's own (camelCase) shape so they go through the
same from_api mapping as live data.
"""

DEGREES = [
    {
        "id": 1,
        "name": "ماجستير العلوم في المحاسبة (عربي)",
        "description": "",
        "standardDurationYears": None,
        "departmentId": 1,
        "generalDegree": "0",
    },
    {
        "id": 3,
        "name": "ماجستير العلوم في المحاسبة (إنجليزي)",
        "description": "",
        "standardDurationYears": None,
        "departmentId": 1,
        "generalDegree": "0",
    },
    {
        "id": 4,
        "name": "دكتوراه الفلسفة في المحاسبة (عربي)",
        "description": "",
        "standardDurationYears": None,
        "departmentId": 1,
        "generalDegree": "0",
    },
    {
        "id": 5,
        "name": "دكتوراه الفلسفة في المحاسبة (إنجليزي)",
        "description": "",
        "standardDurationYears": None,
        "departmentId": 1,
        "generalDegree": "0",
    },
]

# dropdown choices offered by the degree forms
DEPARTMENTS = [
    {"id": 1, "name": "قسم المحاسبة"},
    {"id": 2, "name": "قسم إدارة الأعمال"},
    {"id": 3, "name": "قسم الاقتصاد"},
    {"id": 4, "name": "قسم التسويق"},
    {"id": 5, "name": "قسم المالية والاستثمار"},
    {"id": 6, "name": "قسم إدارة الموارد البشرية"},
    {"id": 7, "name": "قسم نظم المعلومات الإدارية"},
    {"id": 8, "name": "قسم إدارة الجودة"},
]

_UNIVERSITY_NAMES = [
    ("جامعة القاهرة", "2024-01-10T10:00:00Z"),
    ("جامعة الإسكندرية", "2024-01-15T14:30:00Z"),
    ("جامعة أسيوط", "2024-02-01T09:15:00Z"),
    ("جامعة المنصورة", "2024-02-10T11:45:00Z"),
    ("جامعة طنطا", "2024-02-15T16:20:00Z"),
    ("جامعة بنها", "2024-03-01T08:30:00Z"),
    ("جامعة الزقازيق", "2024-03-10T14:00:00Z"),
    ("جامعة بني سويف", "2024-03-15T10:00:00Z"),
    ("جامعة الفيوم", "2024-03-20T15:30:00Z"),
    ("جامعة السويس", "2024-04-01T09:00:00Z"),
    ("جامعة جنوب الوادي", "2024-04-05T11:00:00Z"),
    ("جامعة الأقصر", "2024-04-10T13:00:00Z"),
    ("جامعة مطروح", "2024-04-15T16:00:00Z"),
    ("جامعة الوادي الجديد", "2024-04-20T10:00:00Z"),
    ("جامعة حلوان", "2024-05-01T08:00:00Z"),
    ("جامعة المنوفية", "2024-05-05T12:00:00Z"),
    ("جامعة كفر الشيخ", "2024-05-10T14:00:00Z"),
    ("جامعة دمياط", "2024-05-15T16:00:00Z"),
    ("جامعة بورسعيد", "2024-05-20T10:00:00Z"),
    ("جامعة سوهاج", "2024-05-25T11:00:00Z"),
]

UNIVERSITIES = [
    {"id": i, "name": name, "createdAt": ts, "updatedAt": ts}
    for i, (name, ts) in enumerate(_UNIVERSITY_NAMES, start=1)
]

COURSES = [
    {
        "id": "1",
        "code": "ACC601",
        "name": "المحاسبة المالية المتقدمة",
        "creditHours": 3,
        "isOptional": False,
        "semester": "1",
        "departmentName": "قسم المحاسبة",
        "degreeName": "ماجستير العلوم في المحاسبة (عربي)",
        "msarName": "المحاسبة المالية",
        "prerequisites": [],
        "description": "",
        "instructors": [],
    },
    {
        "id": "2",
        "code": "ACC602",
        "name": "المراجعة وضمان الجودة",
        "creditHours": 3,
        "isOptional": False,
        "semester": "1",
        "departmentName": "قسم المحاسبة",
        "degreeName": "ماجستير العلوم في المحاسبة (عربي)",
        "msarName": "المراجعة",
        "prerequisites": [],
        "description": "",
        "instructors": [],
    },
    {
        "id": "3",
        "code": "ACC611",
        "name": "نظرية المحاسبة",
        "creditHours": 2,
        "isOptional": True,
        "semester": "2",
        "departmentName": "قسم المحاسبة",
        "degreeName": "ماجستير العلوم في المحاسبة (عربي)",
        "msarName": "المحاسبة المالية",
        "prerequisites": ["ACC601"],
        "description": "",
        "instructors": [],
    },
]

FACULTY_COURSES = [
    {
        "id": "1",
        "course_id": "CS101",
        "name": "مقدمة في علوم الحاسب",
        "description": "مقرر أساسي في علوم الحاسب يغطي المفاهيم الأساسية",
        "instructor": "د. أحمد محمد",
        "instructor_id": "inst_1",
        "credits": 3,
        "duration": "3 ساعات أسبوعياً",
        "department": "هندسة الحاسبات",
        "college": "كلية الهندسة",
        "university": "جامعة القاهرة",
        "status": "active",
        "created_at": "2024-01-15T10:00:00Z",
        "updated_at": "2024-01-15T10:00:00Z",
    },
    {
        "id": "2",
        "course_id": "CS201",
        "name": "هيكل البيانات والخوارزميات",
        "description": "دراسة هيكل البيانات والخوارزميات الأساسية",
        "instructor": "د. فاطمة علي",
        "instructor_id": "inst_2",
        "credits": 4,
        "duration": "4 ساعات أسبوعياً",
        "department": "هندسة الحاسبات",
        "college": "كلية الهندسة",
        "university": "جامعة الإسكندرية",
        "status": "active",
        "created_at": "2024-01-20T14:30:00Z",
        "updated_at": "2024-01-20T14:30:00Z",
    },
    {
        "id": "3",
        "course_id": "AI301",
        "name": "الذكاء الاصطناعي",
        "description": "مقرر متقدم في الذكاء الاصطناعي وتعلم الآلة",
        "instructor": "د. محمد السيد",
        "instructor_id": "inst_3",
        "credits": 3,
        "duration": "3 ساعات أسبوعياً",
        "department": "هندسة الحاسبات",
        "college": "كلية الهندسة",
        "university": "جامعة القاهرة",
        "status": "active",
        "created_at": "2024-02-01T09:15:00Z",
        "updated_at": "2024-02-01T09:15:00Z",
    },
    {
        "id": "4",
        "course_id": "DB401",
        "name": "قواعد البيانات المتقدمة",
        "description": "دراسة قواعد البيانات المتقدمة وأنظمة إدارة البيانات",
        "instructor": "د. سارة أحمد",
        "instructor_id": "inst_4",
        "credits": 3,
        "duration": "3 ساعات أسبوعياً",
        "department": "هندسة الحاسبات",
        "college": "كلية الهندسة",
        "university": "جامعة الإسكندرية",
        "status": "inactive",
        "created_at": "2024-02-10T16:45:00Z",
        "updated_at": "2024-02-15T11:20:00Z",
    },
    {
        "id": "5",
        "course_id": "SE501",
        "name": "هندسة البرمجيات",
        "description": "منهجيات وأدوات هندسة البرمجيات الحديثة",
        "instructor": "د. خالد حسن",
        "instructor_id": "inst_5",
        "credits": 3,
        "duration": "3 ساعات أسبوعياً",
        "department": "هندسة الحاسبات",
        "college": "كلية الهندسة",
        "university": "جامعة القاهرة",
        "status": "draft",
        "created_at": "2024-03-01T13:00:00Z",
        "updated_at": "2024-03-01T13:00:00Z",
    },
]
