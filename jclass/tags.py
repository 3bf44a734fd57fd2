"""Names of the standard class file attributes."""

ANNOTATION_DEFAULT_TAG = "AnnotationDefault"
RUNTIME_VISIBLE_ANNOTATIONS_VISIBLE_TAG = "RuntimeVisibleAnnotations"
RUNTIME_INVISIBLE_ANNOTATIONS_INVISIBLE_TAG = "RuntimeInvisibleAnnotations"
BOOTSTRAP_METHODS_TAG = "BootstrapMethods"
CODE_TAG = "Code"
CONSTANT_VALUE_TAG = "ConstantValue"
DEPRECATED_TAG = "Deprecated"
ENCLOSING_METHOD_TAG = "EnclosingMethod"
EXCEPTIONS_TAG = "Exceptions"
INNER_CLASSES_TAG = "InnerClasses"
LINE_NUMBER_TABLE_TAG = "LineNumberTable"
LOCAL_VARIABLE_TABLE_TAG = "LocalVariableTable"
LOCAL_VARIABLE_TYPE_TABLE_TYPE_TAG = "LocalVariableTypeTable"
METHOD_PARAMETERS_TAG = "MethodParameters"
NEST_HOST_TAG = "NestHost"
NEST_MEMBERS_TAG = "NestMembers"
SIGNATURE_TAG = "Signature"
SOURCE_FILE_TAG = "SourceFile"
STACK_MAP_TAG = "StackMap"
STACK_MAP_TABLE_TAG = "StackMapTable"
SYNTHETIC_TAG = "Synthetic"
RUNTIME_VISIBLE_TYPE_ANNOTATIONS_VISIBLE_TAG = "RuntimeVisibleTypeAnnotations"
RUNTIME_INVISIBLE_TYPE_ANNOTATIONS_INVISIBLE_TAG = "RuntimeInvisibleTypeAnnotations"