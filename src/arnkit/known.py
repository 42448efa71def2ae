"""
Valores conhecidos de partition, region e service.

São enums abertos: o core aceita qualquer Identifier válido, estes valores
existem só por conveniência (`Service.S3.to_identifier()`).
As listas de partitions/regions por serviço vêm dos dados de endpoints que
acompanham o boto3/botocore (arquivos locais, sem chamada de rede).
"""
from enum import Enum
from typing import List, Type, TypeVar

from boto3.session import Session

from .models import Identifier

K = TypeVar("K", bound="KnownValue")


class KnownValue(str, Enum):
    def __str__(self) -> str:
        return self.value

    def to_identifier(self) -> Identifier:
        return Identifier.new_unchecked(self.value)

    @classmethod
    def from_identifier(cls: Type[K], identifier: Identifier) -> K:
        return cls(str(identifier))

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


class Partition(KnownValue):
    AWS = "aws"
    AWS_CN = "aws-cn"
    AWS_US_GOV = "aws-us-gov"

    @classmethod
    def default(cls) -> "Partition":
        return cls.AWS


class Region(KnownValue):
    AF_SOUTH_1 = "af-south-1"
    AP_EAST_1 = "ap-east-1"
    AP_NORTHEAST_1 = "ap-northeast-1"
    AP_NORTHEAST_2 = "ap-northeast-2"
    AP_NORTHEAST_3 = "ap-northeast-3"
    AP_SOUTHEAST_1 = "ap-southeast-1"
    AP_SOUTHEAST_2 = "ap-southeast-2"
    AP_SOUTH_1 = "ap-south-1"
    CA_CENTRAL_1 = "ca-central-1"
    EU_CENTRAL_1 = "eu-central-1"
    EU_NORTH_1 = "eu-north-1"
    EU_SOUTH_1 = "eu-south-1"
    EU_WEST_1 = "eu-west-1"
    EU_WEST_2 = "eu-west-2"
    EU_WEST_3 = "eu-west-3"
    ME_SOUTH_1 = "me-south-1"
    SA_EAST_1 = "sa-east-1"
    US_EAST_1 = "us-east-1"
    US_EAST_2 = "us-east-2"
    US_WEST_1 = "us-west-1"
    US_WEST_2 = "us-west-2"
    # aws-cn
    CN_NORTH_1 = "cn-north-1"
    CN_NORTHWEST_1 = "cn-northwest-1"
    # aws-us-gov
    US_GOV_EAST_1 = "us-gov-east-1"
    US_GOV_WEST_1 = "us-gov-west-1"


class Service(KnownValue):
    ACCESSANALYZER = "accessanalyzer"
    ACM = "acm"
    ACM_PCA = "acm-pca"
    ALEXAFORBUSINESS = "alexaforbusiness"
    AMP = "amp"
    AMPLIFY = "amplify"
    AMPLIFYBACKEND = "amplifybackend"
    APIGATEWAY = "apigateway"
    APIGATEWAYMANAGEMENTAPI = "apigatewaymanagementapi"
    APIGATEWAYV2 = "apigatewayv2"
    APPCONFIG = "appconfig"
    APPFLOW = "appflow"
    APPINTEGRATIONS = "appintegrations"
    APPLICATION_AUTOSCALING = "application-autoscaling"
    APPLICATION_INSIGHTS = "application-insights"
    APPMESH = "appmesh"
    APPSTREAM = "appstream"
    APPSYNC = "appsync"
    ATHENA = "athena"
    AUDITMANAGER = "auditmanager"
    AUTOSCALING = "autoscaling"
    AUTOSCALING_PLANS = "autoscaling-plans"
    BACKUP = "backup"
    BATCH = "batch"
    BRAKET = "braket"
    BUDGETS = "budgets"
    CE = "ce"
    CHIME = "chime"
    CLOUD9 = "cloud9"
    CLOUDDIRECTORY = "clouddirectory"
    CLOUDFORMATION = "cloudformation"
    CLOUDHSM = "cloudhsm"
    CLOUDHSMV2 = "cloudhsmv2"
    CLOUDSEARCH = "cloudsearch"
    CLOUDSEARCHDOMAIN = "cloudsearchdomain"
    CLOUDTRAIL = "cloudtrail"
    CLOUDWATCH = "cloudwatch"
    CODEARTIFACT = "codeartifact"
    CODEBUILD = "codebuild"
    CODECOMMIT = "codecommit"
    CODEDEPLOY = "codedeploy"
    CODEGURU_REVIEWER = "codeguru-reviewer"
    CODEGURUPROFILER = "codeguruprofiler"
    CODEPIPELINE = "codepipeline"
    CODESTAR = "codestar"
    CODESTAR_CONNECTIONS = "codestar-connections"
    CODESTAR_NOTIFICATIONS = "codestar-notifications"
    COGNITO_IDENTITY = "cognito-identity"
    COGNITO_IDP = "cognito-idp"
    COGNITO_SYNC = "cognito-sync"
    COMPREHEND = "comprehend"
    COMPREHENDMEDICAL = "comprehendmedical"
    COMPUTE_OPTIMIZER = "compute-optimizer"
    CONFIG = "config"
    CONNECT = "connect"
    CONNECT_CONTACT_LENS = "connect-contact-lens"
    CONNECTPARTICIPANT = "connectparticipant"
    CUR = "cur"
    CUSTOMER_PROFILES = "customer-profiles"
    DATABREW = "databrew"
    DATAEXCHANGE = "dataexchange"
    DATAPIPELINE = "datapipeline"
    DATASYNC = "datasync"
    DAX = "dax"
    DETECTIVE = "detective"
    DEVICEFARM = "devicefarm"
    DEVOPS_GURU = "devops-guru"
    DIRECTCONNECT = "directconnect"
    DISCOVERY = "discovery"
    DLM = "dlm"
    DMS = "dms"
    DOCDB = "docdb"
    DYNAMODB = "dynamodb"
    DYNAMODBSTREAMS = "dynamodbstreams"
    EBS = "ebs"
    EC2 = "ec2"
    EC2_INSTANCE_CONNECT = "ec2-instance-connect"
    ECR = "ecr"
    ECR_PUBLIC = "ecr-public"
    ECS = "ecs"
    EFS = "efs"
    EKS = "eks"
    ELASTIC_INFERENCE = "elastic-inference"
    ELASTICACHE = "elasticache"
    ELASTICBEANSTALK = "elasticbeanstalk"
    ELASTICTRANSCODER = "elastictranscoder"
    ELB = "elb"
    ELBV2 = "elbv2"
    EMR = "emr"
    EMR_CONTAINERS = "emr-containers"
    ES = "es"
    EVENTS = "events"
    FIREHOSE = "firehose"
    FIS = "fis"
    FMS = "fms"
    FORECAST = "forecast"
    FORECASTQUERY = "forecastquery"
    FRAUDDETECTOR = "frauddetector"
    FSX = "fsx"
    GAMELIFT = "gamelift"
    GLACIER = "glacier"
    GLOBALACCELERATOR = "globalaccelerator"
    GLUE = "glue"
    GREENGRASS = "greengrass"
    GREENGRASSV2 = "greengrassv2"
    GROUNDSTATION = "groundstation"
    GUARDDUTY = "guardduty"
    HEALTH = "health"
    HEALTHLAKE = "healthlake"
    HONEYCODE = "honeycode"
    IAM = "iam"
    IDENTITYSTORE = "identitystore"
    IMAGEBUILDER = "imagebuilder"
    IMPORTEXPORT = "importexport"
    INSPECTOR = "inspector"
    IOT = "iot"
    IOT_DATA = "iot-data"
    IOT_JOBS_DATA = "iot-jobs-data"
    IOT1CLICK_DEVICES = "iot1click-devices"
    IOT1CLICK_PROJECTS = "iot1click-projects"
    IOTANALYTICS = "iotanalytics"
    IOTDEVICEADVISOR = "iotdeviceadvisor"
    IOTEVENTS = "iotevents"
    IOTEVENTS_DATA = "iotevents-data"
    IOTFLEETHUB = "iotfleethub"
    IOTSECURETUNNELING = "iotsecuretunneling"
    IOTSITEWISE = "iotsitewise"
    IOTTHINGSGRAPH = "iotthingsgraph"
    IOTWIRELESS = "iotwireless"
    IVS = "ivs"
    KAFKA = "kafka"
    KENDRA = "kendra"
    KINESIS = "kinesis"
    KINESIS_VIDEO_ARCHIVED_MEDIA = "kinesis-video-archived-media"
    KINESIS_VIDEO_MEDIA = "kinesis-video-media"
    KINESIS_VIDEO_SIGNALING = "kinesis-video-signaling"
    KINESISANALYTICS = "kinesisanalytics"
    KINESISANALYTICSV2 = "kinesisanalyticsv2"
    KINESISVIDEO = "kinesisvideo"
    KMS = "kms"
    LAKEFORMATION = "lakeformation"
    LAMBDA = "lambda"
    LEX_MODELS = "lex-models"
    LEX_RUNTIME = "lex-runtime"
    LEXV2_MODELS = "lexv2-models"
    LEXV2_RUNTIME = "lexv2-runtime"
    LICENSE_MANAGER = "license-manager"
    LIGHTSAIL = "lightsail"
    LOCATION = "location"
    LOGS = "logs"
    LOOKOUTEQUIPMENT = "lookoutequipment"
    LOOKOUTMETRICS = "lookoutmetrics"
    LOOKOUTVISION = "lookoutvision"
    MACHINELEARNING = "machinelearning"
    MACIE = "macie"
    MACIE2 = "macie2"
    MANAGEDBLOCKCHAIN = "managedblockchain"
    MARKETPLACE_CATALOG = "marketplace-catalog"
    MARKETPLACE_ENTITLEMENT = "marketplace-entitlement"
    MARKETPLACECOMMERCEANALYTICS = "marketplacecommerceanalytics"
    MEDIACONNECT = "mediaconnect"
    MEDIACONVERT = "mediaconvert"
    MEDIALIVE = "medialive"
    MEDIAPACKAGE = "mediapackage"
    MEDIAPACKAGE_VOD = "mediapackage-vod"
    MEDIASTORE = "mediastore"
    MEDIASTORE_DATA = "mediastore-data"
    MEDIATAILOR = "mediatailor"
    METERINGMARKETPLACE = "meteringmarketplace"
    MGH = "mgh"
    MGN = "mgn"
    MIGRATIONHUB_CONFIG = "migrationhub-config"
    MOBILE = "mobile"
    MQ = "mq"
    MTURK = "mturk"
    MWAA = "mwaa"
    NEPTUNE = "neptune"
    NETWORK_FIREWALL = "network-firewall"
    NETWORKMANAGER = "networkmanager"
    OPSWORKS = "opsworks"
    OPSWORKSCM = "opsworkscm"
    ORGANIZATIONS = "organizations"
    OUTPOSTS = "outposts"
    PERSONALIZE = "personalize"
    PERSONALIZE_EVENTS = "personalize-events"
    PERSONALIZE_RUNTIME = "personalize-runtime"
    PI = "pi"
    PINPOINT = "pinpoint"
    PINPOINT_EMAIL = "pinpoint-email"
    PINPOINT_SMS_VOICE = "pinpoint-sms-voice"
    POLLY = "polly"
    PRICING = "pricing"
    QLDB = "qldb"
    QLDB_SESSION = "qldb-session"
    QUICKSIGHT = "quicksight"
    RAM = "ram"
    RDS = "rds"
    RDS_DATA = "rds-data"
    REDSHIFT = "redshift"
    REDSHIFT_DATA = "redshift-data"
    REKOGNITION = "rekognition"
    RESOURCE_GROUPS = "resource-groups"
    RESOURCEGROUPSTAGGINGAPI = "resourcegroupstaggingapi"
    ROBOMAKER = "robomaker"
    ROUTE53 = "route53"
    ROUTE53DOMAINS = "route53domains"
    ROUTE53RESOLVER = "route53resolver"
    S3 = "s3"
    S3CONTROL = "s3control"
    S3OUTPOSTS = "s3outposts"
    SAGEMAKER = "sagemaker"
    SAGEMAKER_A2I_RUNTIME = "sagemaker-a2i-runtime"
    SAGEMAKER_EDGE = "sagemaker-edge"
    SAGEMAKER_FEATURESTORE_RUNTIME = "sagemaker-featurestore-runtime"
    SAGEMAKER_RUNTIME = "sagemaker-runtime"
    SAVINGSPLANS = "savingsplans"
    SCHEMAS = "schemas"
    SDB = "sdb"
    SECRETSMANAGER = "secretsmanager"
    SECURITYHUB = "securityhub"
    SERVERLESSREPO = "serverlessrepo"
    SERVICE_QUOTAS = "service-quotas"
    SERVICECATALOG = "servicecatalog"
    SERVICECATALOG_APPREGISTRY = "servicecatalog-appregistry"
    SERVICEDISCOVERY = "servicediscovery"
    SES = "ses"
    SESV2 = "sesv2"
    SHIELD = "shield"
    SIGNER = "signer"
    SMS = "sms"
    SNOWBALL = "snowball"
    SNS = "sns"
    SQS = "sqs"
    SSM = "ssm"
    SSO = "sso"
    SSO_ADMIN = "sso-admin"
    SSO_OIDC = "sso-oidc"
    STEPFUNCTIONS = "stepfunctions"
    STORAGEGATEWAY = "storagegateway"
    STS = "sts"
    SUPPORT = "support"
    SWF = "swf"
    SYNTHETICS = "synthetics"
    TEXTRACT = "textract"
    TIMESTREAM_QUERY = "timestream-query"
    TIMESTREAM_WRITE = "timestream-write"
    TRANSCRIBE = "transcribe"
    TRANSFER = "transfer"
    TRANSLATE = "translate"
    WAF = "waf"
    WAF_REGIONAL = "waf-regional"
    WAFV2 = "wafv2"
    WELLARCHITECTED = "wellarchitected"
    WORKDOCS = "workdocs"
    WORKLINK = "worklink"
    WORKMAIL = "workmail"
    WORKMAILMESSAGEFLOW = "workmailmessageflow"
    WORKSPACES = "workspaces"
    XRAY = "xray"


def available_partitions() -> List[str]:
    """
    Partitions conhecidas pelo botocore instalado.
    """
    return Session().get_available_partitions()


def available_regions(service: str, partition: str = Partition.AWS.value) -> List[str]:
    """
    Regions em que `service` tem endpoint na `partition` informada, segundo os
    dados de endpoints do botocore. Serviço desconhecido devolve [].
    """
    return Session().get_available_regions(service, partition_name=partition)
