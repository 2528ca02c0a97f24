"""DMC stranded cotton thread colors.

AIDEV-NOTE: Order matters. Nearest-match ties resolve to the earlier entry,
and several threads share an RGB value (the first one wins exact matches).
"""

DMC_COLORS: "tuple[tuple[str, tuple[int, int, int]], ...]" = (
    ("B5200", (255, 255, 255)),
    ("3713", (243, 206, 205)),
    ("761", (234, 184, 185)),
    ("760", (210, 140, 142)),
    ("3712", (189, 104, 104)),
    ("3328", (167, 74, 74)),
    ("347", (146, 32, 42)),
    ("353", (242, 193, 176)),
    ("352", (217, 134, 118)),
    ("351", (181, 73, 61)),
    ("350", (166, 50, 42)),
    ("349", (149, 10, 30)),
    ("817", (143, 1, 21)),
    ("3708", (234, 155, 175)),
    ("3706", (224, 123, 141)),
    ("3705", (193, 68, 80)),
    ("3801", (182, 46, 59)),
    ("666", (152, 0, 21)),
    ("321", (126, 0, 24)),
    ("304", (127, 0, 45)),
    ("498", (103, 0, 26)),
    ("816", (110, 0, 29)),
    ("815", (81, 0, 28)),
    ("814", (70, 4, 27)),
    ("894", (232, 152, 173)),
    ("893", (210, 99, 124)),
    ("892", (203, 78, 93)),
    ("891", (193, 57, 85)),
    ("818", (247, 212, 211)),
    ("957", (233, 153, 178)),
    ("956", (211, 93, 134)),
    ("309", (145, 50, 68)),
    ("963", (244, 203, 208)),
    ("3716", (228, 170, 186)),
    ("962", (199, 128, 147)),
    ("961", (191, 100, 127)),
    ("3833", (194, 111, 128)),
    ("3832", (177, 71, 93)),
    ("3831", (144, 37, 59)),
    ("777", (95, 2, 36)),
    ("819", (252, 230, 222)),
    ("3326", (227, 165, 175)),
    ("776", (129, 74, 126)),
    ("899", (199, 113, 138)),
    ("335", (183, 84, 112)),
    ("326", (122, 0, 46)),
    ("151", (232, 187, 196)),
    ("3354", (215, 159, 172)),
    ("3733", (193, 122, 141)),
    ("3731", (170, 78, 107)),
    ("3350", (136, 44, 74)),
    ("150", (117, 19, 51)),
    ("3689", (231, 191, 205)),
    ("3688", (186, 129, 152)),
    ("3687", (162, 90, 118)),
    ("3803", (108, 42, 71)),
    ("3685", (83, 13, 43)),
    ("605", (233, 189, 206)),
    ("604", (226, 166, 190)),
    ("603", (210, 132, 165)),
    ("602", (187, 84, 129)),
    ("601", (165, 48, 97)),
    ("600", (147, 25, 80)),
    ("3806", (212, 140, 172)),
    ("3805", (176, 73, 126)),
    ("3804", (167, 57, 112)),
    ("3609", (221, 181, 210)),
    ("3608", (201, 148, 183)),
    ("3607", (156, 76, 141)),
    ("718", (132, 27, 97)),
    ("917", (137, 40, 103)),
    ("915", (86, 0, 43)),
    ("225", (238, 207, 201)),
    ("224", (211, 169, 163)),
    ("152", (195, 149, 148)),
    ("223", (153, 94, 101)),
    ("3722", (140, 78, 82)),
    ("3721", (121, 53, 55)),
    ("221", (99, 28, 33)),
    ("778", (204, 168, 170)),
    ("3727", (196, 158, 169)),
    ("316", (172, 131, 150)),
    ("3726", (135, 86, 94)),
    ("315", (106, 56, 65)),
    ("3802", (85, 35, 49)),
    ("902", (94, 13, 34)),
    ("3743", (195, 188, 196)),
    ("3042", (163, 153, 165)),
    ("3041", (114, 92, 106)),
    ("3740", (85, 60, 72)),
    ("3836", (163, 138, 164)),
    ("3835", (119, 87, 121)),
    ("3834", (74, 39, 72)),
    ("154", (37, 3, 31)),
    ("211", (204, 194, 222)),
    ("210", (178, 165, 205)),
    ("209", (149, 131, 180)),
    ("208", (111, 84, 151)),
    ("3837", (84, 58, 130)),
    ("327", (89, 62, 99)),
    ("153", (208, 187, 211)),
    ("554", (182, 158, 190)),
    ("553", (122, 95, 150)),
    ("552", (101, 70, 127)),
    ("550", (53, 13, 71)),
    ("3747", (200, 206, 218)),
    ("341", (156, 175, 201)),
    ("156", (129, 151, 186)),
    ("340", (119, 131, 180)),
    ("155", (120, 127, 178)),
    ("3746", (85, 95, 154)),
    ("333", (60, 62, 129)),
    ("157", (165, 187, 207)),
    ("794", (132, 160, 186)),
    ("793", (102, 124, 156)),
    ("3807", (73, 93, 137)),
    ("792", (49, 77, 130)),
    ("158", (43, 64, 108)),
    ("791", (12, 37, 87)),
    ("3840", (167, 193, 217)),
    ("3839", (116, 144, 187)),
    ("3838", (91, 121, 170)),
    ("800", (167, 194, 213)),
    ("809", (119, 135, 160)),
    ("799", (102, 140, 175)),
    ("798", (48, 101, 152)),
    ("797", (29, 65, 121)),
    ("796", (0, 42, 101)),
    ("820", (0, 26, 83)),
    ("162", (200, 219, 223)),
    ("827", (172, 200, 213)),
    ("813", (124, 163, 186)),
    ("826", (78, 127, 162)),
    ("825", (6, 83, 123)),
    ("824", (0, 60, 103)),
    ("996", (58, 171, 209)),
    ("3843", (0, 136, 183)),
    ("995", (0, 123, 175)),
    ("3846", (56, 196, 211)),
    ("3845", (0, 171, 189)),
    ("3844", (0, 136, 161)),
    ("159", (166, 173, 190)),
    ("160", (119, 135, 160)),
    ("161", (81, 96, 124)),
    ("3756", (229, 232, 226)),
    ("775", (199, 214, 217)),
    ("3841", (191, 210, 217)),
    ("3325", (161, 189, 205)),
    ("3755", (134, 171, 194)),
    ("334", (91, 136, 164)),
    ("322", (87, 126, 162)),
    ("312", (14, 68, 105)),
    ("803", (0, 53, 88)),
    ("336", (15, 42, 71)),
    ("823", (9, 13, 37)),
    ("939", (11, 12, 28)),
    ("3753", (199, 211, 215)),
    ("3752", (173, 191, 199)),
    ("932", (139, 161, 175)),
    ("931", (91, 122, 142)),
    ("930", (42, 69, 81)),
    ("3750", (13, 51, 70)),
    ("828", (195, 217, 217)),
    ("3761", (177, 209, 213)),
    ("519", (144, 183, 196)),
    ("518", (86, 146, 161)),
    ("3760", (66, 129, 152)),
    ("517", (11, 94, 129)),
    ("3842", (0, 72, 104)),
    ("311", (0, 56, 84)),
    ("747", (205, 228, 227)),
    ("3766", (144, 190, 193)),
    ("807", (85, 147, 156)),
    ("806", (49, 94, 70)),
    ("3765", (0, 96, 121)),
    ("3811", (182, 210, 206)),
    ("598", (154, 191, 187)),
    ("597", (106, 156, 161)),
    ("3810", (70, 133, 136)),
    ("3809", (1, 97, 99)),
    ("3808", (25, 78, 80)),
    ("928", (200, 205, 198)),
    ("927", (159, 171, 163)),
    ("926", (121, 137, 133)),
    ("3768", (73, 90, 95)),
    ("924", (31, 63, 66)),
    ("3849", (102, 158, 148)),
    ("3848", (47, 121, 108)),
    ("3847", (0, 82, 69)),
    ("964", (168, 212, 199)),
    ("959", (117, 183, 159)),
    ("958", (102, 171, 146)),
    ("3812", (0, 136, 103)),
    ("3851", (89, 169, 132)),
    ("943", (18, 140, 100)),
    ("3850", (0, 124, 77)),
    ("993", (129, 177, 151)),
    ("992", (96, 153, 125)),
    ("3814", (44, 120, 98)),
    ("991", (0, 97, 71)),
    ("966", (167, 188, 156)),
    ("564", (174, 199, 167)),
    ("563", (150, 183, 149)),
    ("562", (92, 134, 94)),
    ("505", (55, 99, 61)),
    ("3817", (165, 187, 168)),
    ("3816", (118, 154, 133)),
    ("163", (85, 122, 96)),
    ("3815", (76, 114, 87)),
    ("561", (49, 94, 70)),
    ("504", (154, 115, 30)),
    ("3813", (179, 196, 182)),
    ("503", (140, 167, 154)),
    ("502", (116, 140, 124)),
    ("501", (83, 106, 94)),
    ("500", (19, 37, 25)),
    ("955", (190, 218, 177)),
    ("954", (157, 196, 147)),
    ("913", (127, 173, 119)),
    ("912", (97, 155, 99)),
    ("911", (57, 132, 68)),
    ("910", (30, 108, 43)),
    ("909", (0, 85, 20)),
    ("3818", (0, 64, 21)),
    ("369", (194, 204, 168)),
    ("368", (143, 159, 116)),
    ("320", (105, 127, 91)),
    ("367", (72, 97, 62)),
    ("319", (23, 52, 24)),
    ("890", (13, 29, 0)),
    ("164", (166, 183, 132)),
    ("989", (127, 143, 80)),
    ("988", (110, 126, 64)),
    ("987", (72, 92, 44)),
    ("986", (34, 66, 20)),
    ("772", (219, 219, 178)),
    ("3348", (189, 180, 115)),
    ("3347", (115, 121, 59)),
    ("3346", (90, 97, 43)),
    ("3345", (43, 58, 6)),
    ("895", (33, 58, 22)),
    ("704", (145, 161, 57)),
    ("703", (127, 153, 64)),
    ("702", (93, 135, 56)),
    ("701", (66, 120, 41)),
    ("700", (40, 105, 35)),
    ("699", (0, 79, 17)),
    ("907", (164, 174, 40)),
    ("906", (103, 135, 0)),
    ("905", (79, 102, 17)),
    ("904", (62, 81, 15)),
    ("472", (193, 179, 98)),
    ("471", (144, 140, 72)),
    ("470", (117, 123, 35)),
    ("469", (94, 92, 23)),
    ("937", (81, 85, 19)),
    ("936", (66, 66, 28)),
    ("935", (51, 55, 28)),
    ("934", (39, 39, 22)),
    ("523", (162, 162, 134)),
    ("3053", (157, 154, 112)),
    ("3052", (132, 128, 90)),
    ("3051", (72, 69, 29)),
    ("524", (179, 176, 148)),
    ("522", (150, 154, 126)),
    ("520", (68, 80, 54)),
    ("3364", (135, 135, 89)),
    ("3363", (108, 113, 77)),
    ("3362", (82, 90, 59)),
    ("165", (218, 199, 116)),
    ("3819", (213, 194, 90)),
    ("166", (185, 162, 22)),
    ("581", (136, 132, 32)),
    ("580", (103, 94, 23)),
    ("734", (187, 156, 74)),
    ("733", (165, 135, 44)),
    ("732", (116, 92, 1)),
    ("731", (213, 198, 178)),
    ("730", (90, 72, 8)),
    ("3013", (176, 161, 113)),
    ("3012", (134, 117, 65)),
    ("3011", (102, 88, 47)),
    ("372", (179, 161, 117)),
    ("371", (158, 133, 82)),
    ("370", (159, 136, 82)),
    ("834", (198, 163, 87)),
    ("833", (174, 136, 54)),
    ("832", (154, 115, 30)),
    ("831", (127, 95, 22)),
    ("830", (103, 75, 16)),
    ("829", (95, 61, 13)),
    ("613", (214, 201, 177)),
    ("612", (173, 148, 109)),
    ("611", (112, 90, 57)),
    ("610", (107, 82, 45)),
    ("3047", (225, 206, 163)),
    ("3046", (208, 181, 126)),
    ("3045", (169, 131, 82)),
    ("167", (149, 107, 58)),
    ("746", (245, 235, 207)),
    ("677", (233, 209, 160)),
    ("422", (191, 157, 109)),
    ("3828", (168, 130, 79)),
    ("420", (135, 90, 40)),
    ("869", (112, 76, 30)),
    ("728", (226, 165, 56)),
    ("783", (196, 129, 28)),
    ("782", (153, 92, 0)),
    ("781", (212, 140, 172)),
    ("780", (132, 71, 5)),
    ("676", (219, 175, 109)),
    ("729", (184, 135, 67)),
    ("680", (160, 114, 47)),
    ("3829", (148, 98, 25)),
    ("3822", (236, 196, 111)),
    ("3821", (221, 171, 70)),
    ("3820", (208, 154, 46)),
    ("3852", (192, 129, 3)),
    ("445", (255, 237, 148)),
    ("307", (255, 212, 56)),
    ("973", (250, 195, 0)),
    ("444", (248, 189, 0)),
    ("3078", (250, 227, 160)),
    ("727", (252, 221, 135)),
    ("726", (248, 200, 83)),
    ("725", (238, 175, 66)),
    ("972", (245, 158, 0)),
    ("745", (253, 226, 172)),
    ("744", (250, 209, 130)),
    ("743", (248, 192, 88)),
    ("742", (243, 162, 48)),
    ("741", (238, 135, 0)),
    ("740", (219, 100, 0)),
    ("970", (231, 110, 32)),
    ("971", (199, 113, 138)),
    ("947", (207, 80, 20)),
    ("946", (193, 75, 30)),
    ("900", (166, 54, 31)),
    ("967", (252, 202, 185)),
    ("3824", (246, 170, 151)),
    ("3341", (234, 142, 119)),
    ("3340", (223, 108, 73)),
    ("608", (204, 63, 24)),
    ("606", (174, 13, 19)),
    ("951", (238, 210, 185)),
    ("3856", (233, 187, 147)),
    ("722", (231, 141, 91)),
    ("721", (209, 98, 43)),
    ("720", (177, 67, 2)),
    ("3825", (242, 168, 126)),
    ("922", (190, 103, 58)),
    ("921", (161, 74, 33)),
    ("920", (135, 49, 19)),
    ("919", (113, 28, 2)),
    ("918", (108, 36, 17)),
    ("3770", (248, 230, 213)),
    ("945", (227, 194, 167)),
    ("402", (211, 145, 101)),
    ("3776", (177, 100, 52)),
    ("301", (143, 74, 28)),
    ("400", (102, 39, 0)),
    ("300", (74, 27, 0)),
    ("3823", (251, 234, 197)),
    ("3855", (249, 203, 140)),
    ("3854", (226, 154, 93)),
    ("3853", (205, 114, 45)),
    ("3827", (222, 163, 105)),
    ("977", (214, 146, 84)),
    ("976", (181, 108, 42)),
    ("3826", (151, 84, 35)),
    ("975", (101, 45, 8)),
    ("948", (237, 210, 191)),
    ("754", (228, 182, 160)),
    ("3771", (214, 161, 132)),
    ("758", (206, 152, 132)),
    ("3778", (177, 110, 93)),
    ("356", (152, 82, 69)),
    ("3830", (135, 54, 43)),
    ("355", (109, 27, 22)),
    ("3777", (95, 13, 17)),
    ("3779", (222, 173, 158)),
    ("3859", (161, 111, 93)),
    ("3858", (99, 47, 43)),
    ("3857", (68, 21, 8)),
    ("3774", (229, 201, 182)),
    ("950", (221, 190, 168)),
    ("3064", (171, 122, 99)),
    ("407", (173, 130, 114)),
    ("3773", (143, 74, 28)),
    ("3772", (138, 90, 74)),
    ("632", (112, 66, 53)),
    ("453", (204, 193, 185)),
    ("452", (177, 161, 157)),
    ("451", (134, 116, 111)),
    ("3861", (155, 131, 126)),
    ("3860", (108, 81, 75)),
    ("779", (88, 60, 55)),
    ("712", (237, 223, 201)),
    ("739", (232, 212, 180)),
    ("738", (212, 180, 140)),
    ("437", (204, 159, 113)),
    ("436", (172, 121, 72)),
    ("435", (153, 98, 50)),
    ("434", (121, 68, 18)),
    ("433", (92, 49, 13)),
    ("801", (76, 40, 15)),
    ("898", (63, 33, 8)),
    ("938", (51, 24, 6)),
    ("3371", (31, 5, 0)),
    ("543", (222, 201, 184)),
    ("3864", (191, 162, 139)),
    ("3863", (147, 112, 85)),
    ("3862", (124, 88, 59)),
    ("3031", (57, 37, 21)),
    ("3865", (251, 249, 240)),
    ("822", (223, 211, 191)),
    ("644", (200, 190, 168)),
    ("642", (146, 134, 110)),
    ("640", (123, 111, 83)),
    ("3787", (78, 72, 54)),
    ("3021", (47, 38, 26)),
    ("3024", (202, 199, 186)),
    ("3023", (165, 157, 137)),
    ("3022", (135, 132, 108)),
    ("535", (72, 70, 68)),
    ("3033", (213, 198, 178)),
    ("3782", (180, 163, 138)),
    ("3032", (145, 128, 100)),
    ("3790", (123, 100, 77)),
    ("3781", (72, 52, 32)),
    ("3866", (229, 219, 207)),
    ("842", (187, 165, 146)),
    ("841", (165, 140, 121)),
    ("840", (131, 106, 85)),
    ("839", (78, 56, 39)),
    ("838", (57, 33, 23)),
    ("3072", (208, 208, 196)),
    ("648", (176, 168, 155)),
    ("647", (158, 156, 138)),
    ("646", (128, 123, 105)),
    ("645", (89, 86, 76)),
    ("844", (64, 57, 51)),
    ("762", (221, 222, 220)),
    ("415", (145, 148, 152)),
    ("318", (151, 154, 162)),
    ("414", (112, 116, 125)),
    ("168", (182, 189, 189)),
    ("169", (125, 132, 130)),
    ("317", (76, 82, 90)),
    ("413", (58, 65, 67)),
    ("3799", (44, 44, 42)),
    ("310", (0, 0, 0)),
    ("01", (209, 208, 205)),
    ("02", (190, 190, 189)),
    ("03", (151, 152, 156)),
    ("04", (116, 114, 117)),
    ("05", (197, 183, 173)),
    ("06", (189, 174, 163)),
    ("07", (143, 125, 111)),
    ("08", (88, 68, 55)),
    ("09", (65, 46, 48)),
    ("10", (232, 226, 189)),
    ("11", (232, 215, 124)),
    ("12", (217, 200, 84)),
    ("13", (185, 211, 159)),
    ("14", (223, 226, 165)),
    ("15", (210, 212, 141)),
    ("16", (194, 198, 91)),
    ("17", (233, 198, 95)),
    ("18", (225, 186, 68)),
    ("19", (251, 192, 124)),
    ("20", (247, 192, 175)),
    ("21", (178, 101, 86)),
    ("22", (131, 39, 37)),
    ("23", (249, 234, 234)),
    ("24", (233, 222, 228)),
    ("25", (219, 213, 224)),
    ("26", (201, 200, 218)),
    ("27", (226, 223, 225)),
    ("28", (121, 114, 132)),
    ("29", (60, 46, 68)),
    ("30", (126, 125, 158)),
    ("31", (92, 91, 128)),
    ("32", (62, 64, 99)),
    ("33", (129, 74, 126)),
    ("34", (104, 23, 92)),
    ("35", (80, 17, 65)),
)
