"""Constants specific to YouTrack operations."""

# Default `fields` projections used by the tools when the caller does not
# ask for specific fields. Without a projection YouTrack returns only ids.
DEFAULT_ISSUE_FIELDS = (
    "id,idReadable,summary,description,created,updated,resolved,"
    "project(id,shortName,name),reporter(login,fullName),"
    "customFields(name,value(name,login,fullName,presentation)),tags(id,name)"
)
DEFAULT_PROJECT_FIELDS = "id,shortName,name,description,archived,leader(login,fullName)"
DEFAULT_USER_FIELDS = "id,login,fullName,email,banned,online"
DEFAULT_GROUP_FIELDS = "id,name,description,usersCount"
DEFAULT_COMMENT_FIELDS = "id,text,usesMarkdown,created,updated,author(login,fullName)"
DEFAULT_ATTACHMENT_FIELDS = "id,name,size,mimeType,url,created,author(login,fullName)"
DEFAULT_WORK_ITEM_FIELDS = (
    "id,date,duration(minutes,presentation),text,type(id,name),"
    "author(login,fullName),created,updated"
)
DEFAULT_AGILE_FIELDS = "id,name,projects(id,shortName),sprints(id,name)"
DEFAULT_SPRINT_FIELDS = "id,name,goal,start,finish,archived"
DEFAULT_TAG_FIELDS = "id,name,query,owner(login)"
DEFAULT_CUSTOM_FIELD_FIELDS = "id,name,localizedName,fieldType(id,presentation)"
DEFAULT_PROJECT_CUSTOM_FIELD_FIELDS = (
    "id,canBeEmpty,emptyFieldText,field(id,name,fieldType(id,presentation))"
)

DEFAULT_SKIP = 0
DEFAULT_TOP = 50
