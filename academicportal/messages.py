"""
User-facing messages (Arabic, as shown by the portal).
"""

LOGIN_REQUIRED = "الرجاء تسجيل الدخول أولاً"
NETWORK_ERROR = "فشل في الاتصال بالخادم"
UNEXPECTED_RESPONSE = "استجابة غير متوقعة"
UNEXPECTED_ERROR = "حدث خطأ غير متوقع"
MOCK_DATA_USED = "تم استخدام البيانات التجريبية"

# auth
LOGIN_SUCCESS = "تم تسجيل الدخول بنجاح"
LOGIN_FAILED = "فشل تسجيل الدخول"
LOGIN_REDIRECT = "تم تسجيل الدخول بنجاح! يتم التوجيه..."
TOKEN_MISSING = "فشل في استلام التوكن"
COMPLETE_PROFILE = "يرجي استكمال بياناتك أولاً..."
SIGNUP_FAILED = "حدث خطأ أثناء إنشاء الحساب"

# validation
NATIONAL_ID_REQUIRED = "يجب ادخال الرقم القومي"
NATIONAL_ID_LENGTH = "الرقم القومي يجب ان يكون 14 رقم"
NATIONAL_ID_DIGITS = "الرقم القومي يجب ان يحتوي على أرقام فقط"
PHONE_REQUIRED = "يجب ادخال رقم الهاتف"
PHONE_LENGTH = "رقم الهاتف يجب ان يكون 11 رقم"
PASSWORD_REQUIRED = "يجب ادخال كلمة المرور"
PASSWORD_LENGTH = "كلمة المرور يجب ان تكون اطول من 8 احرف"
CONFIRM_REQUIRED = "يجب تأكيد كلمة المرور"
CONFIRM_MISMATCH = "كلمتا المرور غير متطابقتين"
FULL_NAME_REQUIRED = "الاسم كامل مطلوب"
PHONE_NUMBER_REQUIRED = "رقم الهاتف مطلوب"
REQUEST_TYPE_REQUIRED = "نوع الطلب مطلوب"
SEMESTER_REQUIRED = "الفصل الدراسي مطلوب"
LANGUAGE_REQUIRED = "اللغة مطلوبة"
NATIONAL_ID_MISSING = "الرقم القومي مطلوب"
QUALIFICATION_REQUIRED = "الرجاء إضافة مؤهل واحد على الأقل"
FIELD_REQUIRED = "هذا الحقل مطلوب"
NUMBER_REQUIRED = "يجب ادخال رقم صحيح"

# colleges / universities
COLLEGES_LOAD_FAILED = "فشل في تحميل الكليات"
COLLEGE_CREATE_FAILED = "فشل في إضافة الكلية"
COLLEGE_UPDATE_FAILED = "فشل في تحديث الكلية"
COLLEGE_DELETE_FAILED = "فشل في حذف الكلية"
UNIVERSITIES_LOAD_FAILED = "فشل في تحميل الجامعات"
UNIVERSITY_CREATED = "تم إضافة الجامعة بنجاح"
UNIVERSITY_UPDATED = "تم تحديث الجامعة بنجاح"
UNIVERSITY_UPDATE_FAILED = "فشل في تحديث الجامعة"
UNIVERSITY_DELETED = "تم حذف الجامعة بنجاح"
UNIVERSITY_DELETE_FAILED = "حدث خطأ أثناء حذف الجامعة"
UNIVERSITY_NOT_FOUND = "الجامعة غير موجودة"

# degrees
DEGREE_CREATED = "تمت إضافة الدرجة بنجاح"
DEGREE_UPDATED = "تم تحديث الدرجة بنجاح"
DEGREE_DELETED = "تم حذف الدرجة بنجاح"
DEGREE_NOT_FOUND = "الدرجة العلمية غير موجودة"
DEGREES_LOAD_FAILED = "حدث خطأ في جلب البيانات"
NO_DEGREES = "لا توجد درجات علمية متاحة"

# departments / programs
DEPARTMENTS_LOAD_FAILED = "فشل في تحميل الأقسام"
DEPARTMENT_CREATE_FAILED = "فشل في إضافة القسم"
DEPARTMENT_UPDATE_FAILED = "فشل في تحديث القسم"
DEPARTMENT_DELETE_FAILED = "فشل في حذف القسم"
NO_DEPARTMENTS = "لا توجد أقسام متاحة"
NO_PROGRAMS = "لا توجد برامج متاحة"

# tracks
TRACKS_LOAD_FAILED = "فشل في تحميل المسارات"
TRACK_CREATE_FAILED = "فشل في إضافة المسار"
TRACK_UPDATE_FAILED = "فشل في تحديث المسار"
TRACK_DELETE_FAILED = "فشل في حذف المسار"

# courses
COURSES_LOADED = "تم جلب المقررات بنجاح"
COURSES_LOAD_FAILED = "فشل في تحميل المقررات"
COURSE_CREATE_FAILED = "فشل في إضافة المقرر"
COURSE_UPDATE_FAILED = "فشل في تحديث المقرر"
COURSE_DELETED = "تم حذف المقرر بنجاح"
COURSE_DELETE_FAILED = "فشل في حذف المقرر"
COURSE_NOT_FOUND = "المقرر غير موجود"

# faculty courses (mock)
LECTURER_NOT_FOUND = "المحاضر غير موجود"
LECTURER_CREATED = "تم إضافة المحاضر بنجاح"
LECTURER_UPDATED = "تم تحديث المحاضر بنجاح"
LECTURER_DELETED = "تم حذف المحاضر بنجاح"

# instructors
INSTRUCTORS_LOADED = "تم جلب أعضاء هيئة التدريس بنجاح"
INSTRUCTORS_LOAD_FAILED = "فشل في تحميل أعضاء هيئة التدريس"
INSTRUCTOR_CREATED = "تمت إضافة عضو هيئة التدريس بنجاح"
INSTRUCTOR_CREATE_FAILED = "فشل في إضافة عضو هيئة التدريس"
INSTRUCTOR_UPDATE_FAILED = "فشل في تحديث عضو هيئة التدريس"
INSTRUCTOR_DELETED = "تم حذف عضو هيئة التدريس بنجاح"
INSTRUCTOR_DELETE_FAILED = "فشل في حذف عضو هيئة التدريس"
INSTRUCTOR_DUPLICATE = "الرقم القومي مستخدم بالفعل. لا يمكن إضافة عضو بنفس الرقم القومي."

# intakes
INTAKE_DELETE_LINKED = "لا يمكن حذف هذا العام الدراسي لأنه مرتبط ببيانات أخرى في النظام"
INTAKE_DELETE_ERROR = "حدث خطأ أثناء محاولة حذف العام الدراسي"

# lookups
SEMESTERS_NOT_FOUND = "لم يتم العثور على نقطة النهاية"
ACADEMIC_TITLES_FAILED = "فشل في جلب الألقاب الأكاديمية"
ACADEMIC_TITLES_LOGIN_HINT = "الرجاء التأكد من تسجيل الدخول"

# students
STUDENT_SAVED = "تم الحفظ بنجاح!"
STUDENT_NOT_FOUND = "الطالب غير موجود في النظام."
STUDENT_SAVE_FAILED = "حدث خطأ أثناء إرسال البيانات"
STUDENTS_LOAD_FAILED = "حدث خطأ أثناء جلب البيانات"
STUDENT_NO_DATA = "لا توجد بيانات للطالب"
STUDENT_FETCH_FAILED = "فشل في جلب بيانات الطالب"
NATIONAL_ID_PROMPT = "يرجى إدخال الرقم القومي"

# settings
UNAUTHORIZED = "غير مصرح لك بالوصول"
SETTINGS_LOADED = "تم جلب الإعدادات بنجاح"
PROFILE_UPDATED = "تم تحديث الملف الشخصي بنجاح"
PASSWORD_CHANGED = "تم تغيير كلمة المرور بنجاح"
NOTIFICATIONS_UPDATED = "تم تحديث إعدادات الإشعارات بنجاح"
PRIVACY_UPDATED = "تم تحديث إعدادات الخصوصية بنجاح"
APPEARANCE_UPDATED = "تم تحديث إعدادات المظهر بنجاح"
ACCOUNT_DELETED = "تم حذف الحساب بنجاح"
CONFIRMATION_WRONG = "نص التأكيد غير صحيح"
DELETE_ACCOUNT_CONFIRMATION = "أؤكد حذف الحساب"

# offline (mock) services
DEGREE_CREATED_MOCK = "تم إضافة الدرجة العلمية (بيانات تجريبية)"
DEGREE_UPDATED_MOCK = "تم تحديث الدرجة العلمية (بيانات تجريبية)"
DEGREE_DELETED_MOCK = "تم حذف الدرجة العلمية (بيانات تجريبية)"
UNIVERSITIES_LOADED = "تم جلب الجامعات بنجاح"
COURSE_CREATED = "تمت إضافة المقرر بنجاح"
COURSE_UPDATED = "تم تحديث المقرر بنجاح"
INSTRUCTOR_UPDATED = "تم تحديث عضو هيئة التدريس بنجاح"
